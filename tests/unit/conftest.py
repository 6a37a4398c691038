import pytest
from brownie import VRFCoordinatorV2Mock, network

from scripts import update_front_end
from scripts.deploy_raffle import deploy_raffle
from scripts.settings import DEVELOPMENT_CHAINS


@pytest.fixture(scope="module", autouse=True)
def local_only():
    if network.show_active() not in DEVELOPMENT_CHAINS:
        pytest.skip("unit tests run on development networks only")


@pytest.fixture(autouse=True)
def isolation(fn_isolation):
    # rewind the chain after each test so every test sees a fresh deployment
    pass


@pytest.fixture(scope="module")
def front_end_dir(tmp_path_factory):
    return tmp_path_factory.mktemp("front_end")


def _redirect_front_end(mp, directory):
    mp.setattr(update_front_end, "FRONT_END_ADDRESSES_FILE", str(directory / "contractAddresses.json"))
    mp.setattr(update_front_end, "FRONT_END_ABI_FILE", str(directory / "abi.json"))


@pytest.fixture
def redirect_front_end():
    return _redirect_front_end


@pytest.fixture(scope="module")
def raffle(front_end_dir):
    # deploy_raffle syncs the front end when UPDATE_FRONT_END is set in .env
    with pytest.MonkeyPatch.context() as mp:
        _redirect_front_end(mp, front_end_dir)
        return deploy_raffle()


@pytest.fixture(scope="module")
def vrf_coordinator(raffle):
    return VRFCoordinatorV2Mock[-1]


@pytest.fixture(scope="module")
def entrance_fee(raffle):
    return raffle.getEntranceFee()


@pytest.fixture(scope="module")
def interval(raffle):
    return raffle.getInterval()
