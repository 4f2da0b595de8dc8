"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

import httpx
from dependency_injector import containers, providers

from blepo.application.services.fetch_orchestrator import FetchOrchestrator
from blepo.application.use_cases.build_queue import BuildQueueUseCase
from blepo.application.use_cases.validate_config import ValidateConfigUseCase
from blepo.application.use_cases.watch_video import WatchVideoUseCase
from blepo.domain.services.configuration_provider import ConfigurationProvider
from blepo.domain.services.shorts_detector import ShortsDetector
from blepo.domain.services.video_fetcher import ChannelVideoSource
from blepo.domain.services.watched_store import WatchedStore
from blepo.infrastructure.config.yaml_provider import YamlConfigurationProvider
from blepo.infrastructure.player.mpv_player import MpvPlayer
from blepo.infrastructure.storage.json_store import JsonWatchedStore
from blepo.infrastructure.youtube.fallback_fetcher import FallbackVideoSource
from blepo.infrastructure.youtube.rss_fetcher import RssFeedFetcher
from blepo.infrastructure.youtube.shorts_detector import HttpShortsDetector
from blepo.infrastructure.youtube.ytdlp_fetcher import YtDlpFeedFetcher


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for blepo.

    Only the configuration provider is held by the container; everything
    else is assembled from it by the getter functions below.
    """

    # Configuration
    config_file_path = providers.Configuration()

    # Configuration Provider
    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config_file_path,
    )


def create_container(config_path: str | Path) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to the configuration file

    Returns:
        Configured container instance
    """
    container = Container()
    container.config_file_path.override(str(config_path))
    return container


def get_configuration_provider(container: Container) -> ConfigurationProvider:
    """
    Get the configuration provider from the container.

    Raises:
        ConfigurationError: If the configuration file cannot be loaded
    """
    return container.configuration_provider()


def create_http_client(container: Container) -> httpx.AsyncClient:
    """
    Create the HTTP client shared by the feed fetcher and the Shorts probe.

    The caller owns the client and must close it, typically with ``async with``.
    """
    settings = get_configuration_provider(container).get_fetch_settings()
    return httpx.AsyncClient(
        timeout=settings.timeout_seconds, headers={"User-Agent": settings.user_agent}
    )


def get_video_source(
    container: Container, client: httpx.AsyncClient | None = None
) -> ChannelVideoSource:
    """Get the feed fetcher wrapped with the yt-dlp fallback."""
    settings = get_configuration_provider(container).get_fetch_settings()
    primary = RssFeedFetcher(
        client=client, timeout=settings.timeout_seconds, user_agent=settings.user_agent
    )
    fallback = YtDlpFeedFetcher(
        executable=settings.ytdlp_path, timeout=settings.ytdlp_timeout_seconds
    )
    return FallbackVideoSource(primary, fallback)


def get_shorts_detector(
    container: Container, client: httpx.AsyncClient | None = None
) -> ShortsDetector | None:
    """Get the Shorts detector, or None when detection is disabled."""
    settings = get_configuration_provider(container).get_fetch_settings()
    if not settings.detect_shorts:
        return None
    return HttpShortsDetector(
        client=client, timeout=settings.timeout_seconds, user_agent=settings.user_agent
    )


def get_fetch_orchestrator(
    container: Container, client: httpx.AsyncClient | None = None
) -> FetchOrchestrator:
    return FetchOrchestrator(
        video_source=get_video_source(container, client),
        shorts_detector=get_shorts_detector(container, client),
    )


def get_watched_store(container: Container) -> WatchedStore:
    return JsonWatchedStore(get_configuration_provider(container).get_data_dir())


def get_player(container: Container) -> MpvPlayer:
    config_provider = get_configuration_provider(container)
    return MpvPlayer(
        command=config_provider.get_player_command(),
        ytdlp_path=config_provider.get_fetch_settings().ytdlp_path,
    )


def get_build_queue_use_case(
    container: Container, client: httpx.AsyncClient | None = None
) -> BuildQueueUseCase:
    """Get the use case that fetches and filters the queue."""
    return BuildQueueUseCase(
        orchestrator=get_fetch_orchestrator(container, client),
        watched_store=get_watched_store(container),
        config_provider=get_configuration_provider(container),
    )


def get_watch_video_use_case(container: Container) -> WatchVideoUseCase:
    """Get the use case for playing and marking videos."""
    return WatchVideoUseCase(
        watched_store=get_watched_store(container),
        player=get_player(container),
    )


def get_validate_config_use_case(container: Container) -> ValidateConfigUseCase:
    return ValidateConfigUseCase(get_configuration_provider(container))
