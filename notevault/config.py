"""
Configuration constants for the Notes & Password Manager application.
"""

import logging

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "Secure Notes & Password Manager"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_TITLE = f"{APP_NAME} v{APP_VERSION}"  # Use: Main window title, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.

# Obfuscation Settings
SHIFT_KEY = 5  # Use: Number of code points every password character is shifted by before it is stored. Type: int. Range: Any int; changing it makes previously encoded text undecodable.
CODE_POINT_LIMIT = 0x110000  # Use: Size of the Unicode code point space; shifts wrap around at this boundary. Type: int. Range: 0x110000 (fixed by Unicode).

# Note Store Settings
NOTE_ID_START = 1  # Use: Identifier given to the first note added in a session. Type: int. Range: Positive integer.
NOTE_ID_MIN = -2**31  # Use: Smallest note id accepted from user input. Type: int. Range: 32-bit signed integer minimum.
NOTE_ID_MAX = 2**31 - 1  # Use: Largest note id accepted from user input. Type: int. Range: 32-bit signed integer maximum.
NOTE_LINE_FORMAT = "ID: {id} | Note: {content}"  # Use: Format of a single note in the listing. Type: str. Range: Format string with {id} and {content} fields.
NO_NOTES_MESSAGE = "No notes found."  # Use: Listing returned when the note store is empty. Type: str. Range: Any string.

# Window Settings
WINDOW_WIDTH = 700  # Use: Initial width of the main window in pixels. Type: int. Range: Positive integer.
WINDOW_HEIGHT = 500  # Use: Initial height of the main window in pixels. Type: int. Range: Positive integer.
LAYOUT_SPACING = 10  # Use: Spacing and margins in pixels between window elements. Type: int. Range: Non-negative integer.
DISPLAY_FONT_FAMILY = "Monospace"  # Use: Font family of the read-only display area. Type: str. Range: Any installed font family.
DISPLAY_FONT_SIZE = 14  # Use: Point size of the display area font. Type: int. Range: Positive integer.
STATUS_MESSAGE_TIMEOUT = 2000  # Use: Time in milliseconds a transient status bar message stays visible. Type: int. Range: Positive integer.
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').

# Button Labels
BUTTON_ADD_NOTE = "Add Note"  # Use: Label of the add note button. Type: str. Range: Any string.
BUTTON_VIEW_NOTES = "View All Notes"  # Use: Label of the view notes button. Type: str. Range: Any string.
BUTTON_DELETE_NOTE = "Delete Note"  # Use: Label of the delete note button. Type: str. Range: Any string.
BUTTON_ADD_PASSWORD = "Add Password"  # Use: Label of the add password button. Type: str. Range: Any string.
BUTTON_VIEW_PASSWORD = "View Password"  # Use: Label of the view password button. Type: str. Range: Any string.
BUTTON_DELETE_PASSWORD = "Delete Password"  # Use: Label of the delete password button. Type: str. Range: Any string.

# Prompts
PROMPT_ADD_NOTE = "Enter your note:"  # Use: Input dialog label when adding a note. Type: str. Range: Any string.
PROMPT_DELETE_NOTE = "Enter the ID of the note to delete:"  # Use: Input dialog label when deleting a note. Type: str. Range: Any string.
PROMPT_VIEW_PASSWORD = "Enter service name to view password:"  # Use: Input dialog label when viewing a password. Type: str. Range: Any string.
PROMPT_DELETE_PASSWORD = "Enter service name to delete:"  # Use: Input dialog label when deleting a password. Type: str. Range: Any string.

# Display Messages
WELCOME_MESSAGE = "Welcome! Click a button to get started."  # Use: Initial text of the display area. Type: str. Range: Any string.
NOTE_ADDED_MESSAGE = "Note added successfully!\n\n{listing}"  # Use: Display text after a note is added. Type: str. Range: Format string with {listing}.
NOTE_DELETED_MESSAGE = "Note deleted successfully.\n\n{listing}"  # Use: Display text after a note is deleted. Type: str. Range: Format string with {listing}.
PASSWORD_ADDED_MESSAGE = "Password for '{service}' added successfully."  # Use: Display text after a password is stored. Type: str. Range: Format string with {service}.
PASSWORD_VIEW_MESSAGE = "--- Password for '{service}' ---\n{password}"  # Use: Display text showing a retrieved password. Type: str. Range: Format string with {service} and {password}.
PASSWORD_DELETED_MESSAGE = "Password for '{service}' deleted successfully."  # Use: Display text after a password is deleted. Type: str. Range: Format string with {service}.

# Error Messages
ERROR_TITLE = "Error"  # Use: Title of error dialogs. Type: str. Range: Any string.
ERROR_EMPTY_NOTE = "Note cannot be empty."  # Use: Shown when a blank note is submitted. Type: str. Range: Any string.
ERROR_INVALID_NOTE_ID = "Invalid ID. Please enter a number."  # Use: Shown when a non-numeric note id is submitted. Type: str. Range: Any string.
ERROR_NOTE_NOT_FOUND = "Note with ID {id} not found."  # Use: Shown when the note id does not exist. Type: str. Range: Format string with {id}.
ERROR_EMPTY_CREDENTIALS = "Service and Password cannot be empty."  # Use: Shown when a blank service or password is submitted. Type: str. Range: Any string.
ERROR_EMPTY_SERVICE = "Service name cannot be empty."  # Use: Shown when a blank service name is submitted for lookup or delete. Type: str. Range: Any string.
ERROR_PASSWORD_NOT_FOUND = "Password for '{service}' not found."  # Use: Shown when no password is stored for the service. Type: str. Range: Format string with {service}.

# Logging Settings
LOG_LEVEL = logging.DEBUG  # Use: Root logging level configured at startup. Type: int. Range: Any logging level constant.
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'  # Use: Format of log records written to stderr. Type: str. Range: Valid logging format string.
