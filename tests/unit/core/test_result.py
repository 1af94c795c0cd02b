"""
Tests unitaires pour le type Result et run_catching.
"""

import asyncio

import pytest

from hicinema.core.result import Error, NoMoreData, Success, run_catching


class TestResultVariants:
    """Tests des trois variantes du Result."""

    def test_success_carries_data(self) -> None:
        assert Success([1, 2]).data == [1, 2]

    def test_error_carries_exception(self) -> None:
        cause = ValueError("bad payload")
        assert Error(cause).exception is cause

    def test_variants_are_distinguishable(self) -> None:
        results = [Success([]), Error(RuntimeError()), NoMoreData()]
        assert [type(r) for r in results] == [Success, Error, NoMoreData]

    def test_no_more_data_instances_are_equal(self) -> None:
        assert NoMoreData() == NoMoreData()


class TestRunCatching:
    """Tests pour run_catching."""

    @pytest.mark.asyncio
    async def test_wraps_value_in_success(self) -> None:
        async def block() -> int:
            return 42

        assert await run_catching(block) == Success(42)

    @pytest.mark.asyncio
    async def test_passes_existing_result_through(self) -> None:
        async def block() -> NoMoreData:
            return NoMoreData()

        assert isinstance(await run_catching(block), NoMoreData)

    @pytest.mark.asyncio
    async def test_converts_listed_exception_to_error(self) -> None:
        async def block() -> int:
            raise KeyError("results")

        result = await run_catching(block, errors=(KeyError,))

        assert isinstance(result, Error)
        assert isinstance(result.exception, KeyError)

    @pytest.mark.asyncio
    async def test_wrap_transforms_exception(self) -> None:
        async def block() -> int:
            raise ValueError("boom")

        result = await run_catching(block, errors=(ValueError,), wrap=RuntimeError)

        assert isinstance(result.exception, RuntimeError)

    @pytest.mark.asyncio
    async def test_unlisted_exception_propagates(self) -> None:
        async def block() -> int:
            raise ZeroDivisionError()

        with pytest.raises(ZeroDivisionError):
            await run_catching(block, errors=(ValueError,))

    @pytest.mark.asyncio
    async def test_cancellation_is_not_captured(self) -> None:
        async def block() -> int:
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await run_catching(block)
