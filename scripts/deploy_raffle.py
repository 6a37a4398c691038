from brownie import Raffle, VRFCoordinatorV2Mock, network

from .contracts import get_account, network_config, raffle_args
from .settings import BASE_FEE, DEVELOPMENT_CHAINS, FUND_AMOUNT, GAS_PRICE_LINK
from .update_front_end import update_front_end
from .verify import verify


def publish():
    if network.show_active() in DEVELOPMENT_CHAINS:
        return False
    return network_config().get("verify", False)


def deploy_mocks(account=None):
    account = account or get_account()
    print("Local network detected! Deploying mocks...")
    vrf_coordinator = VRFCoordinatorV2Mock.deploy(
        BASE_FEE, GAS_PRICE_LINK, {"from": account})
    print("Mocks deployed!")
    return vrf_coordinator


def create_subscription(vrf_coordinator, account=None):
    account = account or get_account()
    tx = vrf_coordinator.createSubscription({"from": account})
    tx.wait(1)
    subscription_id = tx.events["SubscriptionCreated"]["subId"]
    vrf_coordinator.fundSubscription(subscription_id, FUND_AMOUNT, {"from": account})
    return subscription_id


def deploy_raffle():
    account = get_account()

    if network.show_active() in DEVELOPMENT_CHAINS:
        vrf_coordinator = deploy_mocks(account)
        vrf_coordinator_address = vrf_coordinator.address
        subscription_id = create_subscription(vrf_coordinator, account)
    else:
        vrf_coordinator = None
        vrf_coordinator_address = network_config()["vrf_coordinator"]
        subscription_id = int(network_config()["subscription_id"])

    args = raffle_args(vrf_coordinator_address, subscription_id)
    raffle = Raffle.deploy(*args, {"from": account})
    print(f"Raffle deployed at {raffle.address}")

    if vrf_coordinator is not None:
        vrf_coordinator.addConsumer(subscription_id, raffle.address, {"from": account})

    if publish():
        raffle.tx.wait(6)
        verify(Raffle, raffle.address, args)

    update_front_end(raffle)
    return raffle


def main():
    deploy_raffle()
