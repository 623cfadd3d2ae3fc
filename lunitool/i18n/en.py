"""English strings."""

TEXTS: dict[str, str] = {
    "LANG_TITLE": "Linux Universal Tool",
    "LANG_SUBTITLE": "Central Management Environment",
    "LANG_LANGUAGE_SELECT": "Language / Sprache",
    "LANG_KEYBOARD_SELECT": "Keyboard Layout",
    "LANG_NAVIGATION": "↑/↓: Navigation   Enter: Select   Backspace: Back   ESC: Exit",
    "LANG_MAIN_MENU": "Main Menu",
    "LANG_INSTALL": "System Installation",
    "LANG_INSTALL_DESC": "Set up a new Linux system",
    "LANG_BACKUP": "Backup & Restore",
    "LANG_BACKUP_DESC": "Backup and recovery tools",
    "LANG_KEYS": "Key Management",
    "LANG_KEYS_DESC": "Boot-USB and authentication",
    "LANG_QUIT": "Exit",
    "LANG_THEME": "Colour Theme",
    "LANG_THEME_DESC": "Change the colours of all dialogs",
    "LANG_THEME_SELECT": "Select Colour Theme",
    "LANG_QUIT_DESC": "Leave lunitool",
    "LANG_EXIT_CONFIRM": "Do you really want to exit lunitool?",
    "LANG_YES": "Yes",
    "LANG_NO": "No",
    "LANG_SELECT": "Select",
    "LANG_BACK": "Back",
    "LANG_OK": "OK",
    "LANG_INFORMATION": "Information",
    "LANG_ERROR": "Error",
    "LANG_NOTICE": "Notice",
    "LANG_INVALID_SELECTION": "Invalid selection",
    "LANG_DIALOG_FAILED": "The dialog program reported an error:",
    "LANG_NOT_IMPLEMENTED": (
        "This module is not yet available.\n\n"
        "It will be implemented in a future version."
    ),
    "LANG_NOT_AVAILABLE_SHORT": "not yet available",
    "LANG_TASK_FAILED": "The module ended with an error:",
    "LANG_ROOT_REQUIRED": (
        "This program needs root privileges for full functionality.\n"
        "Some features may be limited."
    ),
    "LANG_OPTION_DE": "Deutsch (de_DE)",
    "LANG_OPTION_EN": "English (en_US)",
    "LANG_KEYBOARD_DE": "German (de)",
    "LANG_KEYBOARD_US": "US-English (us)",
}
