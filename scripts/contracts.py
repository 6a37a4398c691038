from brownie import accounts, config, network

from .settings import DEVELOPMENT_CHAINS


def get_account(index=None, id=None):
    if index is not None:
        return accounts[index]
    if id:
        return accounts.load(id)
    if network.show_active() in DEVELOPMENT_CHAINS:
        return accounts[0]
    # live networks sign with the key exported in .env
    return accounts.add(config["wallets"]["from_key"])


def network_config():
    return config["networks"][network.show_active()]


def raffle_args(vrf_coordinator, subscription_id):
    """Constructor arguments for Raffle, in declaration order."""
    cfg = network_config()
    return [
        vrf_coordinator,
        cfg["entrance_fee"],
        cfg["key_hash"],
        subscription_id,
        cfg["callback_gas_limit"],
        cfg["interval"],
    ]
