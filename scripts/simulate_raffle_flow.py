from brownie import Raffle, VRFCoordinatorV2Mock, chain, network

from .contracts import get_account
from .settings import DEVELOPMENT_CHAINS


def enter_raffle(account=None):
    account = account or get_account()
    raffle = Raffle[-1]
    entrance_fee = raffle.getEntranceFee()
    tx = raffle.enterRaffle({"from": account, "value": entrance_fee})
    tx.wait(1)
    print(f"{account} entered raffle {raffle.address}!")
    return tx


def mock_offchain(account=None):
    """Play the keeper and the VRF node on a local chain."""
    if network.show_active() not in DEVELOPMENT_CHAINS:
        print("Upkeep and randomness are handled off-chain on", network.show_active())
        return None

    account = account or get_account()
    raffle = Raffle[-1]
    chain.sleep(raffle.getInterval() + 1)
    chain.mine(1)

    upkeep_needed, _ = raffle.checkUpkeep(b"")
    if not upkeep_needed:
        print("No upkeep needed!")
        return None

    tx = raffle.performUpkeep(b"", {"from": account})
    tx.wait(1)
    request_id = tx.events["RequestedRaffleWinner"]["requestId"]
    print(f"Performed upkeep with request #{request_id}")

    VRFCoordinatorV2Mock[-1].fulfillRandomWords(request_id, raffle.address, {"from": account})
    winner = raffle.getRecentWinner()
    print(f"\nThe winner is {winner}!\n")
    return winner


def main():
    enter_raffle()
    mock_offchain()
