"""A seeded JSON store in a temporary directory."""

import pytest

from eventmgmt.infrastructure.bootstrap import Container, build_container
from eventmgmt.infrastructure.config import Settings
from tests.builders import CONFERENCE, INVOICE, KARI, MEETUP, OLA, products, registrations


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path / "data", log_level="WARNING")


@pytest.fixture()
def container(settings) -> Container:
    container = build_container(settings)
    for event in (CONFERENCE, MEETUP):
        container.events.save(event)
    for user in (KARI, OLA):
        container.users.save(user)
    for product in products():
        container.products.save(product)
    for registration in registrations():
        container.registrations.save(registration)
    container.payment_methods.save(INVOICE)
    return container
