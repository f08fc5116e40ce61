"""zenkaku — transliterate ASCII digits into Unicode digit forms and back."""

__version__ = "0.1.0"
