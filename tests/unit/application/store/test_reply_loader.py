"""Unit tests for ReplyLoader."""

import asyncio

import pytest

from hub.adapter.error import TransportError
from hub.adapter.inmemory import InMemoryCommentRepository
from hub.application.store import CommentStore, ReplyLoader, ReplyState
from hub.config import CommentSettings
from hub.domain.error import BusinessRuleViolationError, ReplyLoadError, ValidationError
from hub.domain.model.comment import Comment
from hub.domain.value import CommentId
from tests.factories import make_comment

REPLY = {
    "content": "See you there!",
    "authorName": "Noor",
    "authorEmail": "noor@example.org",
}


class CountingRepository(InMemoryCommentRepository):
    """In-memory repository counting reply fetches, optionally failing them."""

    def __init__(self) -> None:
        super().__init__()
        self.reply_fetches = 0
        self.fail_replies = False

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        self.reply_fetches += 1
        if self.fail_replies:
            raise TransportError()
        return await super().find_replies(parent_id)


@pytest.fixture
def repository() -> CountingRepository:
    return CountingRepository()


@pytest.fixture
def store(repository: CountingRepository) -> CommentStore:
    return CommentStore(repository, CommentSettings(max_reply_depth=2))


class TestToggle:
    """Tests for ReplyLoader.toggle."""

    @pytest.mark.asyncio
    async def test_toggle_while_loading_does_not_fetch_again(self):
        """A second toggle during the first fetch reports LOADING and sends nothing."""
        # Arrange
        gate = asyncio.Event()

        class GatedRepository(CountingRepository):
            async def find_replies(self, parent_id: CommentId) -> list[Comment]:
                self.reply_fetches += 1
                await gate.wait()
                return await InMemoryCommentRepository.find_replies(self, parent_id)

        gated = GatedRepository()
        await gated.save(make_comment("root"))
        await gated.save(make_comment("r1", parent_id="root"))
        loader = ReplyLoader(CommentStore(gated), CommentId("root"))

        # Act
        first = asyncio.create_task(loader.toggle())
        await asyncio.sleep(0)
        second = await loader.toggle()
        gate.set()
        final = await first

        # Assert
        assert second is ReplyState.LOADING
        assert final is ReplyState.EXPANDED
        assert gated.reply_fetches == 1
        assert [r.id for r in loader.replies] == ["r1"]

    @pytest.mark.asyncio
    async def test_fetches_once_then_only_flips_visibility(
        self, repository: CountingRepository, store: CommentStore
    ):
        """First toggle fetches; collapse and re-expand make no further calls."""
        # Arrange
        await repository.save(make_comment("root"))
        await repository.save(make_comment("r1", parent_id="root"))
        loader = ReplyLoader(store, CommentId("root"))

        # Act
        first = await loader.toggle()
        second = await loader.toggle()
        third = await loader.toggle()

        # Assert
        assert (first, second, third) == (
            ReplyState.EXPANDED,
            ReplyState.COLLAPSED,
            ReplyState.EXPANDED,
        )
        assert repository.reply_fetches == 1
        assert [r.id for r in loader.replies] == ["r1"]

    @pytest.mark.asyncio
    async def test_empty_thread_counts_as_loaded(
        self, repository: CountingRepository, store: CommentStore
    ):
        await repository.save(make_comment("root"))
        loader = ReplyLoader(store, CommentId("root"))

        await loader.toggle()
        await loader.toggle()
        await loader.toggle()

        assert repository.reply_fetches == 1
        assert loader.replies == []

    @pytest.mark.asyncio
    async def test_failure_collapses_and_retries_next_time(
        self, repository: CountingRepository, store: CommentStore
    ):
        """A failed load caches nothing, so the next toggle fetches again."""
        # Arrange
        await repository.save(make_comment("root"))
        await repository.save(make_comment("r1", parent_id="root"))
        loader = ReplyLoader(store, CommentId("root"))
        repository.fail_replies = True

        # Act
        with pytest.raises(ReplyLoadError) as exc_info:
            await loader.toggle()
        failed_state = loader.state
        repository.fail_replies = False
        recovered = await loader.toggle()

        # Assert
        assert exc_info.value.comment_id == "root"
        assert failed_state is ReplyState.COLLAPSED
        assert recovered is ReplyState.EXPANDED
        assert repository.reply_fetches == 2

    @pytest.mark.asyncio
    async def test_replies_follow_store_mutations(
        self, repository: CountingRepository, store: CommentStore
    ):
        """A reply deleted through the store disappears from the open thread."""
        await repository.save(make_comment("root"))
        await repository.save(make_comment("r1", parent_id="root"))
        await repository.save(make_comment("r2", parent_id="root"))
        loader = ReplyLoader(store, CommentId("root"))
        await loader.toggle()

        await store.delete_comment(CommentId("r1"))

        assert [r.id for r in loader.replies] == ["r2"]
        assert repository.reply_fetches == 1


class TestSubmitReply:
    """Tests for ReplyLoader.submit_reply."""

    @pytest.mark.asyncio
    async def test_submits_with_parent_and_refetches(
        self, repository: CountingRepository, store: CommentStore
    ):
        """Submitting re-fetches the thread even though it was loaded."""
        # Arrange
        await repository.save(make_comment("root"))
        loader = ReplyLoader(store, CommentId("root"))
        await loader.toggle()

        # Act
        created = await loader.submit_reply(REPLY)

        # Assert
        assert created.parent_id == "root"
        assert created.is_approved is False
        assert repository.reply_fetches == 2
        assert [r.id for r in loader.replies] == [created.id]

    @pytest.mark.asyncio
    async def test_refetch_failure_raises_reply_load_error(
        self, repository: CountingRepository, store: CommentStore
    ):
        await repository.save(make_comment("root"))
        loader = ReplyLoader(store, CommentId("root"))
        repository.fail_replies = True

        with pytest.raises(ReplyLoadError):
            await loader.submit_reply(REPLY)

        # The reply itself was stored
        repository.fail_replies = False
        assert len(await repository.find_replies(CommentId("root"))) == 1

    @pytest.mark.asyncio
    async def test_invalid_reply_is_rejected(
        self, repository: CountingRepository, store: CommentStore
    ):
        await repository.save(make_comment("root"))
        loader = ReplyLoader(store, CommentId("root"))

        with pytest.raises(ValidationError):
            await loader.submit_reply({**REPLY, "authorEmail": "noor"})

        assert repository.reply_fetches == 0

    @pytest.mark.asyncio
    async def test_replies_limited_by_depth(
        self, repository: CountingRepository, store: CommentStore
    ):
        """No reply form below the configured depth."""
        await repository.save(make_comment("root"))
        await repository.save(make_comment("r1", parent_id="root"))
        await repository.save(make_comment("r2", parent_id="r1"))
        root = ReplyLoader(store, CommentId("root"))
        deepest = root.child(CommentId("r1")).child(CommentId("r2"))

        with pytest.raises(BusinessRuleViolationError):
            await deepest.submit_reply(REPLY)

        assert root.can_reply
        assert root.child(CommentId("r1")).can_reply
        assert not deepest.can_reply
        assert deepest.depth == 2
