"""Currency -- ISO 4217 registry with minor units and display symbols."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CurrencyInfo:
    """Information about a single ISO 4217 currency."""

    code: str
    minor_unit: int
    symbol: str
    name: str
    show_code_next_to_symbol: bool = False

    @property
    def minor_unit_multiplier(self) -> int:
        """Minor units per major unit (100 for cents)."""
        if self.minor_unit < 0:
            return 1
        return 10 ** self.minor_unit


class CurrencyRegistry:
    """Static registry of ISO 4217 currencies keyed by code.

    Codes are looked up upper-cased and stripped. Besides the current
    ISO list the table keeps a handful of superseded codes (MRO, STD, VEF,
    ZWD) and the crown-dependency pounds (GGP, IMP, JEP) so that stored
    values written under them stay readable.
    """

    # Code used when a Money value has no resolvable currency
    DEFAULT_CURRENCY_CODE: ClassVar[str] = "EUR"

    # Source: https://www.iso.org/iso-4217-currency-codes.html
    _CURRENCIES: ClassVar[dict[str, CurrencyInfo]] = {
        "AED": CurrencyInfo("AED", 2, ".\u062f.\u0625", "UAE Dirham", True),
        "AFN": CurrencyInfo("AFN", 2, "\u060b", "Afghan Afghani", False),
        "ALL": CurrencyInfo("ALL", 2, "Lek", "Albanian Lek", False),
        "AMD": CurrencyInfo("AMD", 2, "\u0564\u0580.", "Armenian Dram", False),
        "ANG": CurrencyInfo("ANG", 2, "\u0192", "Netherlands Antillean Guilder", True),
        "AOA": CurrencyInfo("AOA", 2, "Kz", "Angolan Kwanza", False),
        "ARS": CurrencyInfo("ARS", 2, "$", "Argentine Peso", True),
        "AUD": CurrencyInfo("AUD", 2, "A$", "Australian Dollar", False),
        "AWG": CurrencyInfo("AWG", 2, "\u0192", "Aruban Florin", True),
        "AZN": CurrencyInfo("AZN", 2, "\u20bc", "Azerbaijan Manat", False),
        "BAM": CurrencyInfo("BAM", 2, "KM", "Bosnia and Herzegovina Convertible Mark", False),
        "BBD": CurrencyInfo("BBD", 2, "Bds$", "Barbadian Dollar", False),
        "BDT": CurrencyInfo("BDT", 2, "\u09f3", "Bangladeshi Taka", False),
        "BGN": CurrencyInfo("BGN", 2, "\u043b\u0432", "Bulgarian Lev", False),
        "BHD": CurrencyInfo("BHD", 3, ".\u062f.\u0628", "Bahraini Dinar", False),
        "BIF": CurrencyInfo("BIF", 0, "FBu", "Burundian Franc", False),
        "BMD": CurrencyInfo("BMD", 2, "BD$", "Bermudian Dollar", False),
        "BND": CurrencyInfo("BND", 2, "", "Brunei Dollar", False),
        "BOB": CurrencyInfo("BOB", 2, "Bs.", "Bolivian Boliviano", False),
        "BRL": CurrencyInfo("BRL", 2, "R$", "Brazilian Real", False),
        "BSD": CurrencyInfo("BSD", 2, "", "Bahamian Dollar", False),
        "BTN": CurrencyInfo("BTN", 2, "Nu.", "Bhutanese Ngultrum", False),
        "BWP": CurrencyInfo("BWP", 2, "P", "Botswana Pula", True),
        "BYN": CurrencyInfo("BYN", 2, "Br", "Belarusian Ruble", False),
        "BZD": CurrencyInfo("BZD", 2, "BZ$", "Belize Dollar", False),
        "CAD": CurrencyInfo("CAD", 2, "CAD$", "Canadian Dollar", False),
        "CDF": CurrencyInfo("CDF", 2, "FC", "Congolese Franc", False),
        "CHF": CurrencyInfo("CHF", 2, "", "Swiss Franc", False),
        "CLF": CurrencyInfo("CLF", 5, "UF", "Chilean Unidad de Fomento", False),
        "CLP": CurrencyInfo("CLP", 0, "CLP$", "Chilean Peso", False),
        "CNY": CurrencyInfo("CNY", 2, "\u5143", "Chinese Yuan", False),
        "COP": CurrencyInfo("COP", 2, "COP$", "Colombian Peso", False),
        "CRC": CurrencyInfo("CRC", 2, "\u20a1", "Costa Rican Colon", True),
        "CUC": CurrencyInfo("CUC", 2, "CUC$", "Cuban Convertible Peso", False),
        "CUP": CurrencyInfo("CUP", 2, "$MN", "Cuban Peso", False),
        "CVE": CurrencyInfo("CVE", 2, "Esc", "Cape Verdean Escudo", False),
        "CZK": CurrencyInfo("CZK", 2, "K\u010d", "Czech Koruna", False),
        "DJF": CurrencyInfo("DJF", 0, "Fdj", "Djiboutian Franc", False),
        "DKK": CurrencyInfo("DKK", 2, "kr", "Danish Krone", True),
        "DOP": CurrencyInfo("DOP", 2, "RD$", "Dominican Peso", False),
        "DZD": CurrencyInfo("DZD", 2, ".\u062f.\u062c", "Algerian Dinar", False),
        "EGP": CurrencyInfo("EGP", 2, "\u00a3", "Egyptian Pound", True),
        "ERN": CurrencyInfo("ERN", 2, "Nfk", "Eritrean Nakfa", False),
        "ETB": CurrencyInfo("ETB", 2, "Br", "Ethiopian Birr", False),
        "EUR": CurrencyInfo("EUR", 2, "\u20ac", "Euro", False),
        "FJD": CurrencyInfo("FJD", 2, "FJ$", "Fijian Dollar", False),
        "FKP": CurrencyInfo("FKP", 2, "\u00a3", "Falkland Islands Pound", True),
        "GBP": CurrencyInfo("GBP", 2, "\u00a3", "Pound Sterling", False),
        "GEL": CurrencyInfo("GEL", 2, "\u10da", "Georgian Lari", False),
        "GGP": CurrencyInfo("GGP", 2, "\u00a3", "Guernsey Pound", False),
        "GHS": CurrencyInfo("GHS", 2, "\u20b5", "Ghanaian Cedi", False),
        "GIP": CurrencyInfo("GIP", 2, "\u00a3", "Gibraltar Pound", True),
        "GMD": CurrencyInfo("GMD", 2, "D", "Gambian Dalasi", False),
        "GNF": CurrencyInfo("GNF", 0, "FG", "Guinean Franc", False),
        "GTQ": CurrencyInfo("GTQ", 2, "Q", "Guatemalan Quetzal", False),
        "GYD": CurrencyInfo("GYD", 2, "G$", "Guyanese Dollar", False),
        "HKD": CurrencyInfo("HKD", 2, "HK$", "Hong Kong Dollar", False),
        "HNL": CurrencyInfo("HNL", 2, "L", "Honduran Lempira", True),
        "HRK": CurrencyInfo("HRK", 2, "kn", "Croatian Kuna", False),
        "HTG": CurrencyInfo("HTG", 2, "G", "Haitian Gourde", False),
        "HUF": CurrencyInfo("HUF", 0, "Ft", "Hungarian Forint", False),
        "IDR": CurrencyInfo("IDR", 2, "Rp", "Indonesian Rupiah", False),
        "ILS": CurrencyInfo("ILS", 2, "\u20aa", "Israeli New Shekel", False),
        "IMP": CurrencyInfo("IMP", 2, "\u00a3", "Manx Pound", True),
        "INR": CurrencyInfo("INR", 2, "\u20b9", "Indian Rupee", False),
        "IQD": CurrencyInfo("IQD", 3, ".\u062f.\u0639", "Iraqi Dinar", False),
        "IRR": CurrencyInfo("IRR", 2, "\ufdfc", "Iranian Rial", True),
        "ISK": CurrencyInfo("ISK", 0, "kr", "Icelandic Krona", True),
        "JEP": CurrencyInfo("JEP", 2, "\u00a3", "Jersey Pound", True),
        "JMD": CurrencyInfo("JMD", 2, "J$", "Jamaican Dollar", False),
        "JOD": CurrencyInfo("JOD", 3, ".\u062f.\u0625", "Jordanian Dinar", True),
        "JPY": CurrencyInfo("JPY", 0, "\u00a5", "Japanese Yen", False),
        "KES": CurrencyInfo("KES", 2, "KSh", "Kenyan Shilling", False),
        "KGS": CurrencyInfo("KGS", 2, "\u0441\u043e\u043c", "Kyrgyzstani Som", False),
        "KHR": CurrencyInfo("KHR", 2, "\u17db", "Cambodian Riel", False),
        "KMF": CurrencyInfo("KMF", 0, "CF", "Comorian Franc", False),
        "KPW": CurrencyInfo("KPW", 0, "\u20a9", "North Korean Won", True),
        "KRW": CurrencyInfo("KRW", 0, "\u20a9", "South Korean Won", True),
        "KWD": CurrencyInfo("KWD", 3, ".\u062f.\u0643", "Kuwaiti Dinar", False),
        "KYD": CurrencyInfo("KYD", 2, "CI$", "Cayman Islands Dollar", False),
        "KZT": CurrencyInfo("KZT", 2, "\u20b8", "Kazakhstani Tenge", False),
        "LAK": CurrencyInfo("LAK", 2, "\u20ad", "Lao Kip", False),
        "LBP": CurrencyInfo("LBP", 2, "\u00a3", "Lebanese Pound", True),
        "LKR": CurrencyInfo("LKR", 2, "\u20a8", "Sri Lankan Rupee", True),
        "LRD": CurrencyInfo("LRD", 2, "L$", "Liberian Dollar", False),
        "LSL": CurrencyInfo("LSL", 2, "L", "Lesotho Loti", True),
        "LYD": CurrencyInfo("LYD", 3, ".\u062f.\u0644", "Libyan Dinar", False),
        "MAD": CurrencyInfo("MAD", 2, ".\u062f.\u0645", "Moroccan Dirham", False),
        "MDL": CurrencyInfo("MDL", 2, "lei", "Moldovan Leu", True),
        "MGA": CurrencyInfo("MGA", 0, "Ar", "Malagasy Ariary", False),
        "MKD": CurrencyInfo("MKD", 2, "\u0434\u0435\u043d", "Macedonian Denar", False),
        "MMK": CurrencyInfo("MMK", 2, "K", "Myanmar Kyat", True),
        "MNT": CurrencyInfo("MNT", 2, "\u20ae", "Mongolian Tugrik", False),
        "MOP": CurrencyInfo("MOP", 2, "P", "Macanese Pataca", True),
        "MRO": CurrencyInfo("MRO", 0, "UM", "Mauritanian Ouguiya (old)", False),
        "MUR": CurrencyInfo("MUR", 2, "\u20a8", "Mauritian Rupee", True),
        "MVR": CurrencyInfo("MVR", 2, "MVR", "Maldivian Rufiyaa", False),
        "MWK": CurrencyInfo("MWK", 2, "MK", "Malawian Kwacha", False),
        "MXN": CurrencyInfo("MXN", 2, "Mex$", "Mexican Peso", False),
        "MYR": CurrencyInfo("MYR", 2, "RM", "Malaysian Ringgit", False),
        "MZN": CurrencyInfo("MZN", 2, "MT", "Mozambican Metical", False),
        "NAD": CurrencyInfo("NAD", 2, "N$", "Namibian Dollar", False),
        "NGN": CurrencyInfo("NGN", 2, "\u20a6", "Nigerian Naira", False),
        "NIO": CurrencyInfo("NIO", 2, "C$", "Nicaraguan Cordoba", False),
        "NOK": CurrencyInfo("NOK", 2, "kr", "Norwegian Krone", True),
        "NPR": CurrencyInfo("NPR", 2, "\u20a8", "Nepalese Rupee", True),
        "NZD": CurrencyInfo("NZD", 2, "NZ$", "New Zealand Dollar", False),
        "OMR": CurrencyInfo("OMR", 3, "\ufdfc", "Omani Rial", True),
        "PAB": CurrencyInfo("PAB", 2, "B/.", "Panamanian Balboa", False),
        "PEN": CurrencyInfo("PEN", 2, "S/", "Peruvian Sol", False),
        "PGK": CurrencyInfo("PGK", 2, "K", "Papua New Guinean Kina", True),
        "PHP": CurrencyInfo("PHP", 2, "\u20b1", "Philippine Peso", False),
        "PKR": CurrencyInfo("PKR", 2, "\u20a8", "Pakistani Rupee", True),
        "PLN": CurrencyInfo("PLN", 2, "z\u0142", "Polish Zloty", False),
        "PYG": CurrencyInfo("PYG", 0, "Gs", "Paraguayan Guarani", False),
        "QAR": CurrencyInfo("QAR", 2, "\ufdfc", "Qatari Riyal", True),
        "RON": CurrencyInfo("RON", 2, "lei", "Romanian Leu", True),
        "RSD": CurrencyInfo("RSD", 2, "\u0414\u0438\u043d.", "Serbian Dinar", False),
        "RUB": CurrencyInfo("RUB", 2, "\u20bd", "Russian Ruble", False),
        "RWF": CurrencyInfo("RWF", 0, "FRw", "Rwandan Franc", False),
        "SAR": CurrencyInfo("SAR", 2, "\ufdfc", "Saudi Riyal", True),
        "SBD": CurrencyInfo("SBD", 2, "SI$", "Solomon Islands Dollar", False),
        "SCR": CurrencyInfo("SCR", 2, "\u20a8", "Seychellois Rupee", True),
        "SDG": CurrencyInfo("SDG", 2, "\u00a3", "Sudanese Pound", True),
        "SEK": CurrencyInfo("SEK", 2, "kr", "Swedish Krona", True),
        "SGD": CurrencyInfo("SGD", 2, "S$", "Singapore Dollar", False),
        "SHP": CurrencyInfo("SHP", 2, "\u00a3", "Saint Helena Pound", True),
        "SLL": CurrencyInfo("SLL", 2, "Le", "Sierra Leonean Leone (old)", False),
        "SOS": CurrencyInfo("SOS", 2, "Sh", "Somali Shilling", False),
        "SRD": CurrencyInfo("SRD", 2, "", "Surinamese Dollar", False),
        "SSP": CurrencyInfo("SSP", 2, "\u00a3", "South Sudanese Pound", True),
        "STD": CurrencyInfo("STD", 2, "Db", "Sao Tome and Principe Dobra (old)", False),
        "SVC": CurrencyInfo("SVC", 2, "\u20a1", "Salvadoran Colon", True),
        "SYP": CurrencyInfo("SYP", 2, "\u00a3", "Syrian Pound", True),
        "SZL": CurrencyInfo("SZL", 2, "\u00a3", "Swazi Lilangeni", True),
        "THB": CurrencyInfo("THB", 2, "\u0e3f", "Thai Baht", False),
        "TJS": CurrencyInfo("TJS", 2, "SM", "Tajikistani Somoni", False),
        "TMT": CurrencyInfo("TMT", 2, "T", "Turkmenistan Manat", True),
        "TND": CurrencyInfo("TND", 3, ".\u062f.\u062a", "Tunisian Dinar", False),
        "TOP": CurrencyInfo("TOP", 2, "T$", "Tongan Paanga", False),
        "TRY": CurrencyInfo("TRY", 2, "\u20ba", "Turkish Lira", False),
        "TTD": CurrencyInfo("TTD", 2, "TT$", "Trinidad and Tobago Dollar", False),
        "TWD": CurrencyInfo("TWD", 0, "NT$", "New Taiwan Dollar", False),
        "TZS": CurrencyInfo("TZS", 0, "TSh", "Tanzanian Shilling", False),
        "UAH": CurrencyInfo("UAH", 2, "\u20b4", "Ukrainian Hryvnia", False),
        "UGX": CurrencyInfo("UGX", 0, "USh", "Ugandan Shilling", False),
        "USD": CurrencyInfo("USD", 2, "$", "US Dollar", False),
        "UYU": CurrencyInfo("UYU", 2, "$U", "Uruguayan Peso", False),
        "UZS": CurrencyInfo("UZS", 2, "so\u2019m", "Uzbekistani Som", False),
        "VEF": CurrencyInfo("VEF", 2, "Bs.F", "Venezuelan Bolivar Fuerte", False),
        "VES": CurrencyInfo("VES", 2, "Bs.S", "Venezuelan Bolivar Soberano", False),
        "VND": CurrencyInfo("VND", 0, "\u20ab", "Vietnamese Dong", False),
        "VUV": CurrencyInfo("VUV", 0, "Vt", "Vanuatu Vatu", False),
        "WST": CurrencyInfo("WST", 2, "T", "Samoan Tala", True),
        "XAF": CurrencyInfo("XAF", 0, "Fr", "Central African CFA Franc", True),
        "XCD": CurrencyInfo("XCD", 2, "EC$", "East Caribbean Dollar", False),
        "XOF": CurrencyInfo("XOF", 0, "Fr", "West African CFA Franc", True),
        "XPF": CurrencyInfo("XPF", 0, "Fr", "CFP Franc", True),
        "YER": CurrencyInfo("YER", 2, "\ufdfc", "Yemeni Rial", True),
        "ZAR": CurrencyInfo("ZAR", 2, "R", "South African Rand", False),
        "ZMW": CurrencyInfo("ZMW", 2, "ZK", "Zambian Kwacha", False),
        "ZWD": CurrencyInfo("ZWD", 2, "Z$", "Zimbabwean Dollar (old)", False),
    }

    @staticmethod
    def normalize(code: str) -> str:
        """Upper-case and strip a candidate code."""
        return code.upper().strip()

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a currency code is in the registry."""
        if not code or not isinstance(code, str):
            return False
        return cls.normalize(code) in cls._CURRENCIES

    @classmethod
    def get_info(cls, code: str) -> CurrencyInfo | None:
        """Get currency information by code."""
        if not code or not isinstance(code, str):
            return None
        return cls._CURRENCIES.get(cls.normalize(code))

    @classmethod
    def validate(cls, code: str) -> str:
        """Validate and normalize a currency code."""
        if not code or not isinstance(code, str):
            raise ValueError(f"Invalid currency code: {code!r}")

        normalized = cls.normalize(code)

        if len(normalized) != 3:
            raise ValueError(f"Currency code must be 3 characters: {code!r}")

        if normalized not in cls._CURRENCIES:
            raise ValueError(f"Invalid ISO 4217 currency code: {code!r}")

        return normalized

    @classmethod
    def all_codes(cls) -> frozenset[str]:
        """Get all registered currency codes."""
        return frozenset(cls._CURRENCIES.keys())

    @classmethod
    def all_currencies(cls) -> dict[str, CurrencyInfo]:
        """Get all currency information."""
        return dict(cls._CURRENCIES)
