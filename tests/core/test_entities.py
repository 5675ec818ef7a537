"""Domain Entities — lookups and dataset snapshots."""

from uuid import uuid4

from customer_images.core.domain_types import EMPTY_ID
from customer_images.core.entities import Customer, CustomerDataset
from tests.factories import make_image


def test_new_customer_defaults():
    customer = Customer(name="Jane Doe", email="jane@example.com")
    assert customer.id == EMPTY_ID
    assert customer.images == []
    assert customer.created_at.tzinfo is not None


def test_find_image():
    customer = Customer(name="Jane Doe", email="jane@example.com", id=uuid4())
    image = make_image(customer.id, id=uuid4())
    customer.images.append(image)
    assert customer.find_image(image.id) is image
    assert customer.find_image(uuid4()) is None


def test_dataset_lookup():
    a = Customer(name="A", email="a@example.com", id=uuid4())
    b = Customer(name="B", email="b@example.com", id=uuid4())
    dataset = CustomerDataset([a, b])
    assert dataset.find(b.id) is b
    assert dataset.index_of(b.id) == 1
    assert dataset.index_of(uuid4()) is None


def test_snapshot_is_deep():
    customer = Customer(name="A", email="a@example.com", id=uuid4())
    dataset = CustomerDataset([customer])
    snapshot = dataset.snapshot()
    customer.name = "changed"
    customer.images.append(make_image(customer.id, id=uuid4()))
    assert snapshot.customers[0].name == "A"
    assert snapshot.customers[0].images == []
