"""Contact book demo built on the menu dispatcher and readers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from conmenu.core.dispatcher import MenuDispatcher
from conmenu.core.items import MenuItem
from conmenu.core.reader import ValidatedReader
from conmenu.core.selection import SelectionReader
from conmenu.core.session import Session


class Category(Enum):
    FAMILY = "family"
    FRIEND = "friend"
    WORK = "work"
    OTHER = "other"


@dataclass
class Contact:
    name: str
    email: str
    phone: str
    category: Category
    age: int
    country: str = ""

    def __str__(self) -> str:
        lines = [
            f"{self.name} ({self.category.name.lower()}, {self.age})",
            f"email: {self.email}",
            f"phone: {self.phone}",
        ]
        if self.country:
            lines.append(f"country: {self.country}")
        return "\n".join(lines)


class ContactBook:
    """In-memory contact book driven from a console menu."""

    def __init__(self, session: Session):
        self.session = session
        self.reader = ValidatedReader(session)
        self.chooser = SelectionReader(self.reader)
        self.dispatcher = MenuDispatcher(session, self.reader)
        self.contacts: list[Contact] = []

    def menu_items(self) -> list[MenuItem]:
        return [
            MenuItem("A", "Add contact", self.add_contact),
            MenuItem("L", "List contacts", self.list_contacts),
            MenuItem("E", "Edit contact", self.edit_contact),
            MenuItem("D", "Delete contacts", self.delete_contacts),
            MenuItem("F", "Find by name", self.find_contacts),
            MenuItem.bound("S", "Summary", self, "summary"),
            MenuItem("V", "Verify contacts", self.verify_contacts),
        ]

    def add_contact(self) -> Contact:
        name = self.reader.read_name("First name")
        email = self.reader.read_email("Email")
        phone = self.reader.read_digits("Phone", lo=7, hi=15)
        category = self.chooser.choose_enum("Category", Category)
        age = self.reader.read_int("Age", 0, 130)
        contact = Contact(name, email, phone, category, age)
        if self.reader.read_bool("Add a country code? (Y/N)"):
            contact.country = self.reader.read_fixed("Two-letter country code", 2).upper()
        self.contacts.append(contact)
        self.session.terminal.write(f"\nAdded {contact.name}.")
        return contact

    def list_contacts(self) -> None:
        if not self.contacts:
            self.session.terminal.write("No contacts yet.")
            return
        for contact in self.contacts:
            self.session.terminal.write(f"\n{contact}")

    def _pick(self, prompt: str) -> Optional[Contact]:
        if not self.contacts:
            self.session.terminal.write("No contacts yet.")
            return None
        return self.chooser.choose_one(prompt, self.contacts)

    def edit_contact(self) -> None:
        contact = self._pick("Which contact do you want to edit?")
        if contact is None:
            return

        def set_email() -> str:
            contact.email = self.reader.read_email("New email")
            return contact.email

        def set_phone() -> str:
            contact.phone = self.reader.read_digits("New phone", lo=7, hi=15)
            return contact.phone

        def set_category() -> Category:
            contact.category = self.chooser.choose_enum("New category", Category)
            return contact.category

        result = self.dispatcher.display_once(
            MenuItem("E", "Email", set_email),
            MenuItem("P", "Phone", set_phone),
            MenuItem("C", "Category", set_category),
            prompt=f"What do you want to change for {contact.name}?",
        )
        if result.ok:
            self.session.terminal.write(f"\nUpdated {contact.name}.")

    def delete_contacts(self) -> None:
        if not self.contacts:
            self.session.terminal.write("No contacts yet.")
            return
        doomed = self.chooser.choose_many("Select a contact to delete", self.contacts)
        for contact in doomed:
            self.contacts.remove(contact)
        self.session.terminal.write(f"\nDeleted {len(doomed)} contact(s).")

    def find_contacts(self) -> None:
        prefix = self.reader.read_match("Name starts with", r"[A-Za-z]{1,20}").lower()
        matches = [c for c in self.contacts if c.name.lower().startswith(prefix)]
        if not matches:
            self.session.terminal.write("No match.")
        for contact in matches:
            self.session.terminal.write(f"\n{contact}")

    def summary(self) -> None:
        counts = {category: 0 for category in Category}
        for contact in self.contacts:
            counts[contact.category] += 1
        self.session.terminal.write(f"{len(self.contacts)} contact(s)")
        for category, count in counts.items():
            self.session.terminal.write(f"{category.name.lower()}:\t{count}")

    def verify_contacts(self) -> None:
        """Fail on duplicate emails so the user can inspect the error with ERR."""
        seen: set[str] = set()
        for contact in self.contacts:
            if contact.email in seen:
                raise ValueError(f"Duplicate email address: {contact.email}")
            seen.add(contact.email)
        self.session.terminal.write(f"{len(self.contacts)} contact(s) verified.")

    def finalize(self) -> None:
        self.session.terminal.write(f"\n{len(self.contacts)} contact(s) in this session.")


def run_demo(session: Session) -> ContactBook:
    """Run the contact book menu until the user returns or exits."""
    book = ContactBook(session)
    book.dispatcher.display_menu(*book.menu_items(), finalizer=book)
    return book
