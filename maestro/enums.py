from enum import Enum


class MaestroNetwork(Enum):
    MAINNET = "Mainnet"
    PREPROD = "Preprod"
    PREVIEW = "Preview"


class Order(Enum):
    ASC = "asc"
    DESC = "desc"


class ContentType(Enum):
    JSON = "application/json"
    CBOR = "application/cbor"
