"""Currency code to display symbol lookup.

The table is declared as ordered (code, symbol) pairs. Several codes appear
twice with different symbols; folding the pairs into a dict in declaration
order keeps the last occurrence.
"""

from __future__ import annotations

from numberhelper.core.types import CurrencyCode

CURRENCY_SYMBOL_PAIRS: tuple[tuple[CurrencyCode, str], ...] = (
    ("USD", "$"),
    ("EUR", "€"),
    ("GBP", "£"),
    ("JPY", "¥"),
    ("AUD", "A$"),
    ("CAD", "C$"),
    ("CHF", "CHF"),
    ("CNY", "¥"),
    ("SEK", "kr"),
    ("NZD", "NZ$"),
    ("MXN", "$"),
    ("SGD", "S$"),
    ("HKD", "HK$"),
    ("NOK", "kr"),
    ("KRW", "₩"),
    ("TRY", "₺"),
    ("RUB", "₽"),
    ("INR", "₹"),
    ("BRL", "R$"),
    ("ZAR", "R"),
    ("PHP", "₱"),
    ("PLN", "zł"),
    ("IDR", "Rp"),
    ("THB", "฿"),
    ("VND", "₫"),
    ("MYR", "RM"),
    ("CZK", "Kč"),
    ("HUF", "Ft"),
    ("ILS", "₪"),
    ("DKK", "kr"),
    ("CLP", "$"),
    ("COP", "$"),
    ("SAR", "﷼"),
    ("AED", "د.إ"),
    ("TWD", "NT$"),
    ("ARS", "$"),
    ("EGP", "£"),
    ("NGN", "₦"),
    ("PKR", "₨"),
    ("BDT", "৳"),
    ("LKR", "₨"),
    ("KZT", "₸"),
    ("QAR", "﷼"),
    ("KWD", "د.ك"),
    ("OMR", "ر.ع."),
    ("JOD", "د.ا"),
    ("BHD", "ب.د"),
    ("DZD", "دج"),
    ("MAD", "د.م."),
    ("TND", "د.ت"),
    ("PEN", "S/"),
    ("UAH", "₴"),
    ("GHS", "₵"),
    ("KES", "KSh"),
    ("TZS", "TSh"),
    ("UGX", "USh"),
    ("XAF", "FCFA"),
    ("XOF", "CFA"),
    ("XPF", "CFP"),
    ("RWF", "FRw"),
    ("BWP", "P"),
    ("ZMW", "ZK"),
    ("MUR", "₨"),
    ("MZN", "MT"),
    ("ALL", "L"),
    ("AMD", "֏"),
    ("AZN", "₼"),
    ("BYN", "Br"),
    ("GEL", "₾"),
    ("KGS", "сом"),
    ("MDL", "L"),
    ("MKD", "ден"),
    ("TJS", "ЅМ"),
    ("UZS", "so'm"),
    ("AFN", "؋"),
    ("IQD", "ع.د"),
    ("LYD", "ل.د"),
    ("SYP", "£"),
    ("YER", "﷼"),
    ("ARS", "AR$"),
    ("AUD", "$"),
    ("BGN", "лв"),
    ("BND", "$"),
    ("BOB", "Bs"),
    ("BRL", "R$"),
    ("CAD", "$"),
    ("CHF", "Fr"),
    ("CLP", "CL$"),
    ("CNY", "¥"),
    ("COP", "$"),
    ("CSD", "CSD"),
    ("CZK", "Kč"),
    ("DEM", "DM"),
    ("DKK", "kr"),
    ("EEK", "KR"),
    ("EGP", "£"),
    ("EUR", "€"),
    ("FJD", "$"),
    ("GBP", "£"),
    ("HKD", "$"),
    ("HRK", "kr"),
    ("HUF", "Ft"),
    ("IDR", "Rp"),
    ("ILS", "₪"),
    ("INR", "Rs"),
    ("JOD", "د.ا"),
    ("JPY", "¥"),
    ("KES", "Sh"),
    ("KRW", "₩"),
    ("LKR", "ரூ"),
    ("LTL", "Lt"),
    ("MAD", ".د.م"),
    ("MTL", "Lm"),
    ("MXN", "$"),
    ("MYR", "RM"),
    ("NOK", "kr"),
    ("NZD", "$"),
    ("PEN", "S/."),
    ("PHP", "₱"),
    ("PKR", "₨"),
    ("PLN", "zł"),
    ("ROL", "leu"),
    ("RON", "RON"),
    ("RSD", "RSD"),
    ("RUB", "р."),
    ("SAR", "ر.س"),
    ("SEK", "kr"),
    ("SGD", "$"),
    ("SIT", "St"),
    ("SKK", "Sk"),
    ("THB", "฿"),
    ("TND", "د.ت"),
    ("TRL", "₺"),
    ("TRY", "₺"),
    ("TWD", "$"),
    ("UAH", "₴"),
    ("USD", "$"),
    ("UYU", "$U"),
    ("VEB", "Bs"),
    ("VEF", "Bs"),
    ("VND", "₫"),
    ("ZAR", "R"),
    ("AED", "AED"),
    ("CRC", "₡"),
    ("QAR", "QR"),
    ("KWD", "KD"),
)

CURRENCY_SYMBOLS: dict[CurrencyCode, str] = dict(CURRENCY_SYMBOL_PAIRS)


def get_currency_symbol_from_code(currency_code: CurrencyCode) -> str:
    """Return the display symbol for ``currency_code``, or ``""`` if unknown.

    Lookup is exact: codes are expected in upper case.
    """
    return CURRENCY_SYMBOLS.get(currency_code, "")
