"""Tests for the default function set and host registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsonata_extended import register
from jsonata_extended.diagnostics import InvalidHostError
from jsonata_extended.runtime import (
    EXTENSION_FUNCTIONS,
    create_default_registry,
    get_shared_registry,
)

if TYPE_CHECKING:
    from conftest import RecordingHost

PASSTHROUGH_NAMES = [name for name, meta in EXTENSION_FUNCTIONS.items() if meta.passthrough]


class TestRegisterHost:
    """register() binds the whole function set."""

    def test_every_function_bound_once(self, host: RecordingHost) -> None:
        register(host)

        names = [name for name, _, _ in host.calls]
        assert names == list(EXTENSION_FUNCTIONS)

    def test_signatures_match_table(self, host: RecordingHost) -> None:
        register(host)

        expected = {name: meta.signature.render() for name, meta in EXTENSION_FUNCTIONS.items()}
        assert host.signatures == expected

    def test_registering_twice_binds_twice(self, host: RecordingHost) -> None:
        register(host)
        register(host)

        assert len(host.calls) == 2 * len(EXTENSION_FUNCTIONS)

    @pytest.mark.parametrize("target", [None, object()])
    def test_unusable_host_message(self, target: object) -> None:
        with pytest.raises(InvalidHostError, match="^Invalid JSONata Expression$"):
            register(target)  # type: ignore[arg-type]

    def test_failed_registration_binds_nothing(self) -> None:
        class Half:
            register_function = None

        with pytest.raises(InvalidHostError):
            register(Half())  # type: ignore[arg-type]


class TestBoundCallables:
    """Calling bound implementations the way a host would."""

    @pytest.mark.parametrize("name", PASSTHROUGH_NAMES)
    def test_missing_value_returns_none(self, host: RecordingHost, name: str) -> None:
        register(host)
        implementation = host.bound[name]

        assert implementation() is None
        assert implementation(None) is None

    def test_moment_functions_are_not_passthrough(self) -> None:
        assert set(EXTENSION_FUNCTIONS) - set(PASSTHROUGH_NAMES) == {"moment", "momentDuration"}

    def test_bound_truncate(self, host: RecordingHost) -> None:
        register(host)

        result = host.bound["truncate"]("1234567890123456789012345678901234567890", {"length": 13})

        assert result == "1234567890..."

    def test_bound_shorten_round_trip(self, host: RecordingHost) -> None:
        register(host)
        value = "1b49aa30-e719-11e6-9835-f723b46a2688"

        short = host.bound["shortenUuid"](value)

        assert host.bound["unshortenUuid"](short) == value

    def test_bound_moment_without_arguments(self, host: RecordingHost) -> None:
        register(host)

        assert host.bound["moment"]() is not None
        assert host.bound["momentDuration"]() is not None


class TestRegistries:
    """Shared and fresh default registries."""

    def test_shared_registry_is_frozen_singleton(self) -> None:
        shared = get_shared_registry()

        assert shared is get_shared_registry()
        assert shared.frozen
        assert list(shared) == list(EXTENSION_FUNCTIONS)

    def test_default_registry_is_fresh(self) -> None:
        first = create_default_registry()
        second = create_default_registry()

        assert first is not second
        assert not first.frozen
        assert len(first) == len(EXTENSION_FUNCTIONS)

    def test_default_registry_accepts_custom_functions(self, host: RecordingHost) -> None:
        def shout(value: str | None = None) -> str | None:
            return value.upper() if value is not None else None

        registry = create_default_registry()
        registry.register(shout, signature="<s?:s>")
        registry.bind(host)

        assert host.signatures["shout"] == "<s?:s>"
        assert "shout" not in get_shared_registry()

    def test_descriptors_carry_python_names(self) -> None:
        shared = get_shared_registry()

        for name, meta in EXTENSION_FUNCTIONS.items():
            assert shared.get_python_name(name) == meta.python_name
