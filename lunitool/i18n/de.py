"""Deutsche Texte."""

TEXTS: dict[str, str] = {
    "LANG_TITLE": "Linux Universal Tool",
    "LANG_SUBTITLE": "Zentrale Verwaltungsumgebung",
    "LANG_LANGUAGE_SELECT": "Sprache / Language",
    "LANG_KEYBOARD_SELECT": "Tastaturlayout",
    "LANG_NAVIGATION": "↑/↓: Navigation   Enter: Auswählen   Backspace: Zurück   ESC: Beenden",
    "LANG_MAIN_MENU": "Hauptmenü",
    "LANG_INSTALL": "System-Installation",
    "LANG_INSTALL_DESC": "Neues Linux-System einrichten",
    "LANG_BACKUP": "Sicherung & Wiederherstellung",
    "LANG_BACKUP_DESC": "Sichern und wiederherstellen",
    "LANG_KEYS": "Schlüssel-Verwaltung",
    "LANG_KEYS_DESC": "Boot-USB und Authentifizierung",
    "LANG_QUIT": "Beenden",
    "LANG_THEME": "Farbschema",
    "LANG_THEME_DESC": "Farben aller Dialoge ändern",
    "LANG_THEME_SELECT": "Farbschema wählen",
    "LANG_QUIT_DESC": "lunitool verlassen",
    "LANG_EXIT_CONFIRM": "Möchtest du lunitool wirklich beenden?",
    "LANG_YES": "Ja",
    "LANG_NO": "Nein",
    "LANG_SELECT": "Auswählen",
    "LANG_BACK": "Zurück",
    "LANG_OK": "OK",
    "LANG_INFORMATION": "Information",
    "LANG_ERROR": "Fehler",
    "LANG_NOTICE": "Hinweis",
    "LANG_INVALID_SELECTION": "Ungültige Auswahl",
    "LANG_DIALOG_FAILED": "Das Dialogprogramm hat einen Fehler gemeldet:",
    "LANG_NOT_IMPLEMENTED": (
        "Dieses Modul ist noch nicht verfügbar.\n\n"
        "Es wird in einer zukünftigen Version implementiert."
    ),
    "LANG_NOT_AVAILABLE_SHORT": "noch nicht verfügbar",
    "LANG_TASK_FAILED": "Das Modul wurde mit einem Fehler beendet:",
    "LANG_ROOT_REQUIRED": (
        "Dieses Programm benötigt Root-Rechte für volle Funktionalität.\n"
        "Möglicherweise sind einige Funktionen eingeschränkt."
    ),
    "LANG_OPTION_DE": "Deutsch (de_DE)",
    "LANG_OPTION_EN": "English (en_US)",
    "LANG_KEYBOARD_DE": "Deutsch (de)",
    "LANG_KEYBOARD_US": "US-Englisch (us)",
}
