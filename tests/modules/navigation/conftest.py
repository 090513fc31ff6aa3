"""Shared fixtures for navigation tests."""

import pytest

from modules.navigation.models import FreelancerRef

from tests.factories import make_listing


@pytest.fixture
def listing():
    return make_listing()


@pytest.fixture
def freelancer():
    return FreelancerRef(id="freelancer-1", display_name="Ada Freelancer")
