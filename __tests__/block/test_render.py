"""Tests for rendering blocks and configuration."""
import logging
import pytest
from blockshift import configure_logging, get_settings
from blockshift.block import BlockInstance, BlockKindError, BlockKindNotFound, render_block


class TestRenderBlock:

    def test_render_with_save(self, registry, factory):
        registry.register("core/text-block", default_attributes={"value": ""}, save=lambda attrs: f"<p>{attrs['value']}</p>")
        block = factory.create_block("core/text-block", {"value": "ribs"})

        assert render_block(registry, block) == "<p>ribs</p>"

    def test_render_callback_wins(self, registry, factory):
        registry.register(
            "core/latest-posts",
            default_attributes={"postsToShow": 5},
            save=lambda attrs: None,
            render=lambda attrs: f"<ul data-count=\"{attrs['postsToShow']}\"></ul>",
        )
        block = factory.create_block("core/latest-posts")

        assert render_block(registry, block) == "<ul data-count=\"5\"></ul>"

    def test_kind_without_callbacks(self, registry):
        registry.register("core/test-block")

        with pytest.raises(BlockKindError):
            render_block(registry, BlockInstance(name="core/test-block"))

    def test_unregistered_kind(self, registry):
        with pytest.raises(BlockKindNotFound):
            render_block(registry, BlockInstance(name="core/missing-block"))


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BLOCKSHIFT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("BLOCKSHIFT_SUPPRESS_TRANSFORM_ERRORS", raising=False)

        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.suppress_transform_errors is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BLOCKSHIFT_LOG_LEVEL", "debug")
        monkeypatch.setenv("BLOCKSHIFT_SUPPRESS_TRANSFORM_ERRORS", "Yes")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.suppress_transform_errors is True

    def test_configure_logging_uses_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("BLOCKSHIFT_LOG_LEVEL", "info")

        configure_logging()

        assert calls[0]["level"] == "INFO"
        assert calls[0]["force"] is True
