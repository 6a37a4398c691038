import os

TENPOW18 = 10 ** 18

DEVELOPMENT_CHAINS = ["development", "ganache-local", "hardhat"]

# VRFCoordinatorV2Mock constructor: 0.25 LINK flat fee, 1 gwei LINK per gas
BASE_FEE = 25 * 10 ** 16
GAS_PRICE_LINK = 10 ** 9
FUND_AMOUNT = 30 * TENPOW18

RAFFLE_STATE_OPEN = 0
RAFFLE_STATE_CALCULATING = 1

FRONT_END_ADDRESSES_FILE = os.getenv(
    "FRONT_END_ADDRESSES_FILE", "../lottery-nextjs/constants/contractAddresses.json")
FRONT_END_ABI_FILE = os.getenv(
    "FRONT_END_ABI_FILE", "../lottery-nextjs/constants/abi.json")

# seconds
WINNER_PICKED_TIMEOUT = 10 * 60
