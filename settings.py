# settings.py

# pump.fun metadata upload endpoint (IPFS)
METADATA_API_URL = "https://pump.fun/api/ipfs"

# PumpPortal local-signing trade endpoint
TRADE_API_URL = "https://pumpportal.fun/api/trade-local"

# Pool the trades are routed to
POOL = "pump"

# Explorer used for transaction links in the logs
EXPLORER_TX_URL = "https://solscan.io/tx/"

# File holding the named wallets (name -> publicKey / privateKey)
WALLET_STORAGE_FILE = "stored_wallets.json"

# File the last created mint address is written to
MINT_FILE = "mint.json"

# CSV file with one row per finished cycle
CYCLE_HISTORY_FILE = "cycle_history.csv"

# Minimum SOL balance required before the run starts
MIN_BALANCE = 0.01

# How many times an invalid menu answer is re-asked before giving up
MAX_PROMPT_ATTEMPTS = 10

# Delay between cycles in seconds
DELAY_BETWEEN_CYCLES = 5

# Token metadata defaults
TOKEN_NAME = "Zephyr AI"
TOKEN_SYMBOL = "ZPHR"
TOKEN_DESCRIPTION = ""
TWITTER_URL = "https://x.com/Zephyraisol"
TELEGRAM_URL = ""
WEBSITE_URL = "https://www.zephyrai.dev/"
LOGO_PATH = "./logo.png"

# Amount of SOL spent on the dev buy when the token is created
INITIAL_AMOUNT = 0.3

# Allowed slippage percentage for trades
SLIPPAGE = 10

# Priority fee in SOL
PRIORITY_FEE = 0.000005

# Time between token creation and the sale, in milliseconds
WAIT_TIME_MS = 120_000

# Number of create/sell cycles to perform
CYCLES = 30
