"""
Tests for core modules
"""
import asyncio

import pytest

from core.client import PokerClient
from core.exceptions import PlanningPokerError, SessionNotFoundError, ValidationError
from core.registry import SessionRegistry
from core.state_machine import SessionStateMachine
from core.validators import (
    ParticipantNameValidator,
    TaskTitleValidator,
    VoteValueValidator,
    clean_name,
    clean_title,
    clean_vote,
)
from domain.enums import TransitionReason


class TestValidators:
    """Tests for validators"""

    def test_name_validator_trims(self):
        assert ParticipantNameValidator(name="  Alice ").name == "Alice"

    def test_name_validator_rejects_blank(self):
        with pytest.raises(ValueError):
            ParticipantNameValidator(name="   ")

    def test_title_validator(self):
        assert TaskTitleValidator(title=" Story 1 ").title == "Story 1"
        with pytest.raises(ValueError):
            TaskTitleValidator(title="")
        with pytest.raises(ValueError):
            TaskTitleValidator(title="x" * 201)

    def test_vote_validator(self):
        assert VoteValueValidator(value=8).value == 8
        assert VoteValueValidator(value="13").value == 13
        with pytest.raises(ValueError):
            VoteValueValidator(value=4)

    def test_clean_helpers(self):
        assert clean_name(" Bob ") == "Bob"
        assert clean_title("Story") == "Story"
        assert clean_vote(" 21 ") == 21
        assert clean_vote(3) == 3

    @pytest.mark.parametrize("raw", ["", "abc", "4", "100"])
    def test_clean_vote_raises_validation_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            clean_vote(raw)
        assert exc_info.value.error_code == "invalid_vote"

    def test_clean_name_error_message(self):
        with pytest.raises(ValidationError) as exc_info:
            clean_name("  ")
        assert exc_info.value.message == "Name cannot be empty"
        assert exc_info.value.error_code == "invalid_name"

    def test_length_caps(self):
        assert clean_name("x" * 100) == "x" * 100
        with pytest.raises(ValidationError):
            clean_name("x" * 101)
        assert clean_title(" " + "t" * 200 + " ") == "t" * 200
        with pytest.raises(ValidationError):
            clean_title("t" * 201)


class TestExceptions:
    """Tests for exception hierarchy"""

    def test_hierarchy(self):
        assert issubclass(ValidationError, PlanningPokerError)
        assert issubclass(SessionNotFoundError, PlanningPokerError)

    def test_message_and_code(self):
        error = SessionNotFoundError("missing", error_code="session_not_found")
        assert str(error) == "missing"
        assert error.error_code == "session_not_found"


class TestSessionRegistry:
    """Tests for SessionRegistry"""

    def test_create_generates_id_and_session(self):
        registry = SessionRegistry()
        machine = registry.create()
        assert machine.session_id in registry
        assert machine.session is not None
        assert len(registry) == 1

    def test_sessions_are_isolated(self):
        registry = SessionRegistry()
        first = registry.create("one")
        second = registry.create("two")
        first.join("A", "Alice")
        assert second.session.participants == []
        assert sorted(registry.session_ids()) == ["one", "two"]

    def test_get_or_create_returns_same_machine(self):
        registry = SessionRegistry()
        machine = registry.get_or_create("chat")
        assert registry.get_or_create("chat") is machine
        assert len(registry) == 1

    def test_get_and_require(self):
        registry = SessionRegistry()
        assert registry.get("missing") is None
        with pytest.raises(SessionNotFoundError):
            registry.require("missing")
        machine = registry.create("chat")
        assert registry.require("chat") is machine

    def test_settings_passed_to_machines(self):
        registry = SessionRegistry(facilitator_only=True, outlier_threshold=0.3)
        machine = registry.create()
        assert machine.facilitator_only is True
        assert machine.outlier_threshold == 0.3

    def test_lock_per_session(self):
        registry = SessionRegistry()
        assert registry.lock("a") is registry.lock("a")
        assert registry.lock("a") is not registry.lock("b")

    @pytest.mark.asyncio
    async def test_lock_serializes_writers(self):
        registry = SessionRegistry()
        machine = registry.create("chat")
        machine.create_task("Story")
        order = []

        async def cast(user_id, value):
            async with registry.lock("chat"):
                order.append(f"start-{user_id}")
                await asyncio.sleep(0)
                machine.vote(user_id, value)
                order.append(f"end-{user_id}")

        await asyncio.gather(cast("A", 5), cast("B", 8))

        assert order == ["start-A", "end-A", "start-B", "end-B"]
        assert len(machine.current_task.votes) == 2


class TestPokerClient:
    """Tests for PokerClient"""

    def test_identity_generated_once(self):
        client = PokerClient(SessionStateMachine())
        user_id = client.user_id
        client.join("Alice")
        client.become_facilitator()
        assert client.user_id == user_id
        assert client.machine.session.facilitator_id == user_id

    def test_ensures_session(self):
        machine = SessionStateMachine()
        PokerClient(machine)
        assert machine.session is not None

    def test_shared_session_keeps_state(self):
        machine = SessionStateMachine()
        alice = PokerClient(machine)
        alice.join("Alice")
        PokerClient(machine)
        assert len(machine.session.participants) == 1

    def test_blank_input_filtered(self):
        client = PokerClient(SessionStateMachine())
        assert client.join("   ").reason == TransitionReason.INVALID_INPUT
        assert client.machine.session.participants == []
        assert client.create_task("").reason == TransitionReason.INVALID_INPUT

    def test_join_stores_trimmed_name(self):
        client = PokerClient(SessionStateMachine())
        client.join("  Alice ")
        assert client.user_name == "Alice"
        assert client.machine.session.participants[0].name == "Alice"

    def test_create_task_trims_title(self):
        client = PokerClient(SessionStateMachine())
        client.create_task("  Story 1 ")
        assert client.machine.current_task.title == "Story 1"

    def test_voting_flow(self):
        machine = SessionStateMachine()
        alice = PokerClient(machine)
        bob = PokerClient(machine)
        alice.join("Alice")
        bob.join("Bob")
        alice.become_facilitator()
        assert bob.become_facilitator().reason == TransitionReason.FACILITATOR_TAKEN
        assert alice.is_facilitator
        assert not bob.is_facilitator

        assert not alice.can_vote
        alice.create_task("Story 1")
        assert alice.can_vote
        alice.vote(5)
        bob.vote("13")
        assert alice.has_voted and bob.has_voted

        alice.reveal_votes()
        assert not bob.can_vote
        assert bob.vote(1).reason == TransitionReason.ALREADY_REVEALED
        assert alice.results().average == 9.0

        alice.reset_voting()
        assert not alice.has_voted
        assert alice.results() is None

    def test_invalid_vote(self):
        client = PokerClient(SessionStateMachine())
        client.create_task("Story")
        assert client.vote("7").reason == TransitionReason.INVALID_VOTE_VALUE

    def test_select_task(self):
        client = PokerClient(SessionStateMachine())
        client.create_task("Story 1")
        first = client.machine.current_task.id
        client.create_task("Story 2")
        assert client.select_task(first).applied
        assert client.machine.current_task.title == "Story 1"
