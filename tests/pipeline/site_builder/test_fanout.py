"""Tests for the keyed fan-out/join helper."""

import asyncio

import pytest

from therapytips_ssg.pipeline.site_builder.fanout import fan_out, fan_out_list


@pytest.mark.asyncio
async def test_fan_out_returns_results_by_key_concurrently():
    order = []

    async def job(name, delay):
        await asyncio.sleep(delay)
        order.append(name)
        return name.upper()

    results = await fan_out({"slow": job("slow", 0.02), "fast": job("fast", 0)})
    assert results == {"slow": "SLOW", "fast": "FAST"}
    assert order == ["fast", "slow"]


@pytest.mark.asyncio
async def test_fan_out_first_failure_propagates():
    async def ok():
        return 1

    async def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await fan_out({"a": ok(), "b": fail()})


@pytest.mark.asyncio
async def test_fan_out_list_keeps_input_order():
    async def value(v, delay):
        await asyncio.sleep(delay)
        return v

    assert await fan_out_list([value(1, 0.02), value(2, 0)]) == [1, 2]
    assert await fan_out_list([]) == []
