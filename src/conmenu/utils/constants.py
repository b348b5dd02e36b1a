"""Constants used throughout conmenu."""

# Number of tries a user gets for each typed read
DEFAULT_ATTEMPTS = 3

# Shown above the menu options when no one-time prompt is given
DEFAULT_PROMPT = "Please select a menu option..."

# Used by read_line when the caller passes an empty prompt
FALLBACK_PROMPT = "Input requested"

SELECTION_PROMPT = "Enter your selection"
CONTINUE_PROMPT = "Press ENTER to continue..."
CONFIRM_PROMPT = "Is that correct? (Y/N)"
OPTION_NUMBER_PROMPT = "Enter the option number"
ANOTHER_ITEM_PROMPT = "Do you want to select another item"

FAREWELL = "Goodbye!"


# Reserved selection tokens
class Reserved:
    """Menu codes handled by the dispatcher itself."""

    RETURN = "R"
    EXIT = "X"
    ERROR = "ERR"


# Console messages for dispatcher failures
class DispatchMessage:
    """Diagnostics printed when an item cannot be dispatched."""

    NO_SUCH_MENU = "No such menu!"
    NOT_FOUND = "Method does not exist!"
    INACCESSIBLE = "Method is inaccessible!"
    BAD_ARGUMENTS = "Error: Check method arguments and/or class instance!"
    FAULT = "An error has occurred!"
