"""Shared vocabularies used by the SagePay field table."""

from __future__ import annotations

from enum import Enum


class FieldType(Enum):
    """Data types a field value can take."""

    STRING = "string"
    INTEGER = "integer"
    CURRENCY = "currency"
    ENUM = "enum"
    CURRENCY_CODE = "iso4217"
    COUNTRY_CODE = "iso3166"
    HTML = "html"
    XML = "xml"
    URL = "rfc1738"
    EMAIL = "rfc532n"
    LANGUAGE_CODE = "iso639-2"
    DATE = "date"
    BASE64 = "base64"
    COUNTRY_SUBDIVISION = "us"


class CharClass(Enum):
    """One-character codes naming the characters a field may contain."""

    UPPER = "A"
    LOWER = "a"
    DIGIT = "9"
    EXTENDED = "^"
    SPACE = " "
    SLASH = "/"
    AMPERSAND = "&"
    PERIOD = "."
    HYPHEN = "-"
    QUOTE = "'"
    COLON = ":"
    COMMA = ","
    BRACKET = "("
    CURLY_BRACKET = "{"
    PLUS = "+"
    UNDERSCORE = "_"
    NEWLINE = "n"
    ANY = "*"


class MessageSource(Enum):
    """Protocol messages a field can be carried in, in either direction."""

    SERVER_REGISTRATION = "server-registration"
    SERVER_REGISTRATION_RESPONSE = "server-registration-response"
    SERVER_NOTIFICATION = "server-notification"
    SERVER_NOTIFICATION_RESPONSE = "server-notification-response"
    DIRECT_REGISTRATION = "direct-registration"
    DIRECT_FINAL_RESPONSE = "direct-final-response"
    DIRECT_PAYPAL_RESPONSE = "direct-paypal-response"
    DIRECT_PAYPAL_CALLBACK = "direct-paypal-callback"
    DIRECT_3DSECURE_CALLBACK = "direct-3dsecure-callback"
    DIRECT_3DSECURE_CALLBACK_RESPONSE = "direct-3dsecure-callback-response"
    DIRECT_3DAUTH_ISSUER = "direct-3dauth-issuer"
    DIRECT_3DAUTH_ISSUER_RETURN = "direct-3dauth-issuer-return"
    DIRECT_3DAUTH_RESPONSE = "direct-3dauth-response"
    PAYPAL_COMPLETE = "paypal-complete"
    CUSTOM = "custom"
