import logging
import pathlib

import pytest

import spannergen
from spannergen import Schema, TypeResolver

LOG = logging.getLogger("spannergen.tests")

REPORTS = pathlib.Path(__file__).parent.parent / "reports"
REPORTS.mkdir(exist_ok=True)

logging.basicConfig(
    level=logging.DEBUG,
    filename=REPORTS / "test-report.log",
    filemode="w",
)


def pytest_runtest_setup(item):
    LOG.info("=======================================================")
    LOG.info(f"Running test: {item.name}")
    LOG.info("=======================================================")


@pytest.fixture
def order_sdl() -> str:
    return '''
    "GoType: time.Time"
    scalar Time

    scalar JSON

    enum Status {
        DRAFT
        PUBLISHED
    }

    type Customer {
        id: ID!
        name: String!
        nickname: String
    }

    type Item {
        "SpannerPK"
        sku: String!
        title: String!
    }

    type Warehouse {
        name: String!
        city: String
    }

    type Order {
        orderId: ID!
        "SpannerColumn: buyer"
        customer: Customer
        owner: Customer!
        items: [Item!]
        tags: [String]!
        status: Status
        state: Status!
        warehouse: Warehouse
        quantity: Int
        total: Float
        paid: Boolean
        note: String
        createdAt: Time!
        meta: JSON
    }
    '''


@pytest.fixture
def order_schema(order_sdl: str) -> Schema:
    return spannergen.build_schema([order_sdl])


@pytest.fixture
def resolver(order_schema: Schema) -> TypeResolver:
    return TypeResolver(order_schema)
