"""Tests for the contact book demo."""

import pytest

from conmenu.cli.demo import Category, Contact, ContactBook, run_demo

ADA = ["a", "ada", "Ada@Example.com", "5551234", "2", "y", "36", "n", ""]


def test_add_and_list(scripted):
    console = scripted(*ADA, "l", "", "r")
    book = run_demo(console.session)

    assert book.contacts == [
        Contact("Ada", "ada@example.com", "5551234", Category.FRIEND, 36)
    ]
    assert "Ada (friend, 36)" in console.out


def test_add_with_country_code(scripted):
    console = scripted("a", "bob", "bob@example.org", "5550000", "3", "y", "40", "y", "gb", "", "r")
    book = run_demo(console.session)

    assert book.contacts[0].country == "GB"


def test_exit_runs_finalizer(scripted):
    console = scripted(*ADA, "x")
    with pytest.raises(SystemExit) as exc_info:
        run_demo(console.session)

    assert exc_info.value.code == 0
    assert "1 contact(s) in this session." in console.out
    assert "Goodbye!" in console.out


def test_invalid_input_becomes_inspectable_fault(scripted):
    console = scripted("a", "1", "2", "3", "", "err", "r")
    run_demo(console.session)

    assert "ValidationExhausted: Invalid name format!" in console.err
    assert "*****Error details*****" in console.out


def test_verify_duplicate_emails(scripted):
    console = scripted(*ADA, *ADA, "v", "", "r")
    run_demo(console.session)

    assert console.session.last_error.category == "ValueError"
    assert "ada@example.com" in console.session.last_error.message


def test_edit_single_contact_through_submenu(scripted):
    console = scripted(*ADA, "e", "p", "5559999", "", "r")
    book = run_demo(console.session)

    assert book.contacts[0].phone == "5559999"
    assert "What do you want to change for Ada?" in console.out
    assert "Updated Ada." in console.out


def test_delete_many(scripted):
    bob = ["a", "bob", "bob@example.org", "5550000", "3", "y", "40", "n", ""]
    console = scripted(*ADA, *bob, "d", "2", "y", "n", "", "r")
    book = run_demo(console.session)

    assert [c.name for c in book.contacts] == ["Ada"]
    assert "Deleted 1 contact(s)." in console.out


def test_find_by_prefix(scripted):
    console = scripted(*ADA, "f", "AD", "", "r")
    run_demo(console.session)

    assert console.out.count("Ada (friend, 36)") == 1


def test_summary_is_late_bound(scripted):
    console = scripted("s", "", "r")
    book = ContactBook(console.session)
    book.summary = lambda: console.session.terminal.write("patched summary")
    book.dispatcher.display_menu(*book.menu_items())

    assert "patched summary" in console.out


def test_empty_book_messages(scripted):
    console = scripted("l", "", "e", "", "d", "", "r")
    run_demo(console.session)

    assert console.out.count("No contacts yet.") == 3


def test_edit_returned_without_change(scripted):
    console = scripted(*ADA, "e", "r", "", "r")
    book = run_demo(console.session)

    assert book.contacts[0].phone == "5551234"
    assert "Updated Ada." not in console.out


def test_edit_with_invalid_phone_reports_fault(scripted):
    console = scripted(*ADA, "e", "p", "12", "abc", "1", "", "r")
    book = run_demo(console.session)

    assert book.contacts[0].phone == "5551234"
    assert "Updated Ada." not in console.out
    assert console.session.last_error.category == "ValidationExhausted"
