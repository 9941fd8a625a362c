"""Gopher item type codes (RFC 1436, section 3.8)."""

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    """Known single-character item types."""

    FILE = "0"
    DIRECTORY = "1"
    CSO_PHONE_BOOK = "2"
    ERROR = "3"
    BINHEX = "4"
    DOS_ARCHIVE = "5"
    UUENCODED = "6"
    SEARCH_SERVER = "7"
    TELNET_SESSION = "8"
    BINARY = "9"
    REDUNDANT_SERVER = "+"
    TN3270_SESSION = "T"
    GIF = "g"
    IMAGE = "I"

    @classmethod
    def from_char(cls, char: str) -> "ItemType | UnknownType":
        """
        Convert a wire code into an item type.

        Unrecognised codes are preserved as UnknownType so that
        as_char() always gives back the original character.
        """
        try:
            return cls(char)
        except ValueError:
            return UnknownType(char)

    def as_char(self) -> str:
        """Get the wire code for this type."""
        return self.value

    def is_directory(self) -> bool:
        return self is ItemType.DIRECTORY

    @property
    def label(self) -> str:
        """Short human readable name."""
        return _LABELS[self]


@dataclass(frozen=True)
class UnknownType:
    """An item type code outside the RFC 1436 set (e.g. "i" or "h")."""

    char: str

    def as_char(self) -> str:
        return self.char

    def is_directory(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return f"?{self.char}"


_LABELS = {
    ItemType.FILE: "TXT",
    ItemType.DIRECTORY: "DIR",
    ItemType.CSO_PHONE_BOOK: "CSO",
    ItemType.ERROR: "ERR",
    ItemType.BINHEX: "HQX",
    ItemType.DOS_ARCHIVE: "DOS",
    ItemType.UUENCODED: "UUE",
    ItemType.SEARCH_SERVER: "QRY",
    ItemType.TELNET_SESSION: "TEL",
    ItemType.BINARY: "BIN",
    ItemType.REDUNDANT_SERVER: "MIR",
    ItemType.TN3270_SESSION: "3270",
    ItemType.GIF: "GIF",
    ItemType.IMAGE: "IMG",
}
