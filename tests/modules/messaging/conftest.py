"""Shared fixtures for messaging tests."""

import pytest

from modules.messaging.repository import ConversationRepository, MessageRepository
from modules.messaging.service import MessagingService
from modules.users.repository import UserRepository
from modules.users.service import UserService


@pytest.fixture
def conversations(fake_db):
    return ConversationRepository(fake_db)


@pytest.fixture
def service(fake_db, conversations):
    return MessagingService(
        conversations,
        MessageRepository(fake_db),
        UserService(UserRepository(fake_db)),
        poll_interval=0.01,
        max_poll_interval=0.04,
    )
