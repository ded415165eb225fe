"""Domain-wide constants."""

CURRENCY_CODE_LENGTH = 3

# Account currency used when none is configured
ACCOUNT_CURRENCY = "USD"

# Forex pairs known to be tradable, quoted as BASE+QUOTE
FOREX_CURRENCY_PAIRS: tuple[str, ...] = (
    "EURUSD",
    "GBPUSD",
    "USDJPY",
    "AUDUSD",
    "NZDUSD",
    "USDCAD",
    "USDCHF",
    "USDHKD",
    "USDSGD",
    "USDMXN",
    "USDNOK",
    "USDSEK",
    "USDDKK",
    "USDZAR",
    "USDTRY",
    "USDPLN",
    "USDCNH",
    "USDCZK",
    "USDHUF",
    "USDTHB",
    "EURGBP",
    "EURJPY",
    "EURCHF",
    "EURAUD",
    "EURCAD",
    "EURNZD",
    "EURNOK",
    "EURSEK",
    "GBPJPY",
    "GBPCHF",
    "GBPAUD",
    "GBPCAD",
    "GBPNZD",
    "AUDJPY",
    "AUDCAD",
    "AUDCHF",
    "AUDNZD",
    "CADJPY",
    "CADCHF",
    "CHFJPY",
    "NZDJPY",
    "NZDCAD",
    "NZDCHF",
    "XAUUSD",
    "XAGUSD",
)
