import json
from types import SimpleNamespace

import pytest

RAFFLE_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
RAFFLE_ABI = [
    {
        "inputs": [],
        "name": "enterRaffle",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "winner", "type": "address"}
        ],
        "name": "WinnerPicked",
        "type": "event",
    },
]


@pytest.fixture
def fake_raffle():
    return SimpleNamespace(address=RAFFLE_ADDRESS, abi=RAFFLE_ABI)


@pytest.fixture
def addresses_file(tmp_path):
    path = tmp_path / "contractAddresses.json"
    path.write_text(json.dumps({}))
    return str(path)


@pytest.fixture
def abi_file(tmp_path):
    return str(tmp_path / "abi.json")
