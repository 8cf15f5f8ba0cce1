from dataclasses import dataclass

from idcollection import IdentityCollection, and_, or_


@dataclass
class Contact:
    _id: int
    name: str
    team: str
    active: bool = True


def is_active(contact: Contact) -> bool:
    return contact.active


def on_platform(contact: Contact) -> bool:
    return contact.team == "platform"


def main() -> None:
    contacts: IdentityCollection[Contact, str] = IdentityCollection()
    contacts.add(
        Contact(1, "Ada", "platform"),
        Contact(2, "Grace", "compilers"),
        Contact(3, "Linus", "platform", active=False),
    )
    contacts.add(Contact(2, "Grace H.", "compilers"))  # same identity, replaced

    print(f"{len(contacts)} contacts: {[c.name for c in contacts]}")

    active_platform = contacts.find(lambda c: and_([is_active, on_platform], c))
    print(f"Active platform: {[c.name for c in active_platform]}")

    reachable = contacts.find(lambda c: or_([is_active, on_platform], c))
    print(f"Active or platform: {[c.name for c in reachable]}")

    for team, members in contacts.group_by("team").items():
        print(f"{team}: {members.length}")

    print(f"Removed: {contacts.remove(3)}")
    print(f"Nothing to remove: {contacts.remove(3)}")
    print(f"First: {contacts.single()}")

    by_name = contacts.sort(lambda a, b: (a.name > b.name) - (a.name < b.name))
    print(f"Sorted: {[c.name for c in by_name]}")


if __name__ == "__main__":
    main()
