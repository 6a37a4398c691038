import json
import os

from brownie import Raffle, chain

from .settings import FRONT_END_ABI_FILE, FRONT_END_ADDRESSES_FILE


def front_end_enabled():
    return os.getenv("UPDATE_FRONT_END", "").strip().lower() in ("1", "true", "yes", "on")


def update_contract_addresses(raffle, chain_id, path=FRONT_END_ADDRESSES_FILE):
    if os.path.exists(path):
        with open(path, "r") as f:
            current_addresses = json.load(f)
    else:
        current_addresses = {}

    if chain_id in current_addresses:
        if raffle.address not in current_addresses[chain_id]:
            current_addresses[chain_id].append(raffle.address)
    else:
        current_addresses[chain_id] = [raffle.address]

    with open(path, "w") as f:
        json.dump(current_addresses, f)
    return current_addresses


def update_abi(raffle, path=FRONT_END_ABI_FILE):
    with open(path, "w") as f:
        json.dump(raffle.abi, f)


def update_front_end(raffle=None, chain_id=None, addresses_file=None, abi_file=None):
    if not front_end_enabled():
        return False
    addresses_file = addresses_file or FRONT_END_ADDRESSES_FILE
    abi_file = abi_file or FRONT_END_ABI_FILE
    if raffle is None:
        raffle = Raffle[-1]
    if chain_id is None:
        chain_id = str(chain.id)

    print("Updating front end...")
    update_contract_addresses(raffle, chain_id, addresses_file)
    update_abi(raffle, abi_file)
    print(f"Front end updated with {raffle.address} on chain {chain_id}")
    return True


def main():
    update_front_end()
