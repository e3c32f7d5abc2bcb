import pytest

from maestro import Configuration, MaestroClient

API_KEY = "test-api-key"
BASE_URL = "https://preprod.gomaestro-api.org/v1"
STAKE_ADDR = "stake_test1uqpe2p4cu4lp2zakdasnfuexf4gv8dcvu3xs2t6ysh8n3rczl7us0"
TX_HASH = "1e4f3c6a5c9e2d8b7a6f5e4d3c2b1a0f9e8d7c6b5a4f3e2d1c0b9a8f7e6d5c4b"


@pytest.fixture
def configuration():
    return Configuration(api_key=API_KEY, network="Preprod")


@pytest.fixture
def client(configuration):
    return MaestroClient(configuration)
