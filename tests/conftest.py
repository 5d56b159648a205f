"""Shared pytest fixtures for splitledger tests."""

from pathlib import Path
import pytest

from splitledger.domain.balance import BalanceService
from splitledger.domain.expense import ExpenseService
from splitledger.domain.group import GroupService
from splitledger.domain.user import UserService
from splitledger.store.factories import create_memory_store


@pytest.fixture
def store(monkeypatch):
    """Create an empty in-memory store with the default tolerance."""
    monkeypatch.delenv("SPLITLEDGER_EPSILON", raising=False)
    return create_memory_store()


@pytest.fixture
def user_service(store):
    """Create a UserService over the test store."""
    return UserService(store)


@pytest.fixture
def group_service(store):
    """Create a GroupService over the test store."""
    return GroupService(store)


@pytest.fixture
def expense_service(store):
    """Create an ExpenseService over the test store."""
    return ExpenseService(store)


@pytest.fixture
def balance_service(store):
    """Create a BalanceService over the test store."""
    return BalanceService(store)


@pytest.fixture
def sample_users(user_service):
    """Create users u1-u4 and return them keyed by id."""
    names = {"u1": "Alice", "u2": "Bob", "u3": "Carol", "u4": "Dave"}
    return {
        user_id: user_service.create_user(user_id, name)
        for user_id, name in names.items()
    }


@pytest.fixture
def sample_group(group_service, sample_users):
    """Create a group holding u1, u2 and u3."""
    return group_service.create_group("flat", "Flat", ["u1", "u2", "u3"])


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_script(fixtures_dir):
    """Path to a ledger script where every expense is valid."""
    return str(fixtures_dir / "sample_ledger.json")


@pytest.fixture
def rejected_script(fixtures_dir):
    """Path to a ledger script containing invalid expenses."""
    return str(fixtures_dir / "rejected_ledger.json")
