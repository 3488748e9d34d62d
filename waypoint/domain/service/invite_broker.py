"""Invite broker domain service."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import logfire

from waypoint.config import InviteSettings
from waypoint.domain.error import NotFoundError, UpstreamError
from waypoint.domain.model.invite import InviteCacheEntry
from waypoint.domain.repository import CredentialRepository, InviteCacheRepository
from waypoint.domain.value import InviteSnapshot, InviteSource, UpstreamInvite

from .base import Service


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class InviteClient:
    """Upstream invite-creation client interface."""

    async def create_invite(self, credential: str) -> UpstreamInvite:
        """Create a fresh invite upstream.

        Args:
            credential: ``Authorization`` header value for the link

        Returns:
            The invite payload

        Raises:
            UpstreamError: On a non-2xx status, a transport failure, or a
                response without an invite code
        """
        raise NotImplementedError


class InviteBroker(Service):
    """Resolves link ids to invite URLs through a cache.

    Fresh cache entries are served without contacting upstream. Misses and
    expired entries trigger a refresh; if the refresh fails, whatever entry
    is cached (expired or not) is served instead. Concurrent refreshes for
    the same link id share a single upstream call.
    """

    def __init__(
        self,
        invite_cache: InviteCacheRepository,
        credential_repository: CredentialRepository,
        invite_client: InviteClient,
        settings: InviteSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize invite broker.

        Args:
            invite_cache: Cache of resolved invites
            credential_repository: Upstream credentials per link id
            invite_client: Upstream invite-creation client
            settings: Invite configuration
            clock: Source of the current time
        """
        self.invite_cache = invite_cache
        self.credential_repository = credential_repository
        self.invite_client = invite_client
        self.settings = settings
        self._clock = clock
        self._in_flight: dict[str, asyncio.Task[InviteCacheEntry]] = {}

    async def resolve(self, link_id: str) -> str:
        """Resolve a link id to a joinable invite URL.

        Args:
            link_id: The short link identifier

        Returns:
            The invite URL (fresh from cache, freshly refreshed, or stale)

        Raises:
            NotFoundError: If the link id has no registered credential
            UpstreamError: If the refresh failed and nothing is cached
        """
        with logfire.span("invite_broker.resolve", link_id=link_id):
            credential = await self.credential_repository.find_by_link_id(link_id)
            if credential is None:
                logfire.warn("Unknown invite link", link_id=link_id)
                raise NotFoundError("Invite link", link_id)

            cached = await self.invite_cache.get(link_id)
            if cached is not None and not cached.is_expired(self._clock()):
                logfire.info(
                    "Serving cached invite",
                    link_id=link_id,
                    code=cached.code,
                    source=InviteSource.CACHE.value,
                )
                return cached.url

            try:
                entry = await self._refresh_once(link_id, credential)
            except UpstreamError as e:
                # Another request may have refreshed while we waited
                fallback = await self.invite_cache.get(link_id)
                if fallback is None:
                    logfire.error(
                        "Invite refresh failed with nothing cached",
                        link_id=link_id,
                        status_code=e.status_code,
                        error=e.detail,
                    )
                    raise

                logfire.warn(
                    "Invite refresh failed, serving cached invite",
                    link_id=link_id,
                    code=fallback.code,
                    expired=fallback.is_expired(self._clock()),
                    status_code=e.status_code,
                    error=e.detail,
                    source=InviteSource.STALE_FALLBACK.value,
                )
                return fallback.url

            logfire.info(
                "Serving refreshed invite",
                link_id=link_id,
                code=entry.code,
                source=InviteSource.REFRESHED.value,
            )
            return entry.url

    async def inspect(self, link_id: str) -> InviteSnapshot:
        """Describe the cached invite for a link id without refreshing it.

        Args:
            link_id: The short link identifier

        Returns:
            Snapshot of the cached entry

        Raises:
            NotFoundError: If nothing is cached for the link id
        """
        entry = await self.invite_cache.get(link_id)
        if entry is None:
            raise NotFoundError("Cached invite", link_id)

        now = self._clock()
        return InviteSnapshot(
            link_id=link_id,
            url=entry.url,
            code=entry.code,
            expires_at=entry.expires_at,
            expires_in_seconds=entry.seconds_remaining(now),
            max_uses=entry.max_uses,
            uses=entry.uses,
            is_expired=entry.is_expired(now),
        )

    async def _refresh_once(self, link_id: str, credential: str) -> InviteCacheEntry:
        """Join the in-flight refresh for a link id, starting one if needed."""
        task = self._in_flight.get(link_id)
        if task is None:
            task = asyncio.ensure_future(self._refresh(link_id, credential))
            self._in_flight[link_id] = task
            task.add_done_callback(lambda done: self._forget(link_id, done))
        else:
            logfire.info("Joining in-flight invite refresh", link_id=link_id)

        # A cancelled caller must not cancel the refresh other callers await
        return await asyncio.shield(task)

    def _forget(self, link_id: str, task: asyncio.Task[InviteCacheEntry]) -> None:
        if self._in_flight.get(link_id) is task:
            del self._in_flight[link_id]
        # Mark the failure as retrieved even if every waiter was cancelled
        if not task.cancelled():
            task.exception()

    async def _refresh(self, link_id: str, credential: str) -> InviteCacheEntry:
        """Create a new invite upstream and overwrite the cache entry."""
        with logfire.span("invite_broker.refresh", link_id=link_id):
            try:
                invite = await self.invite_client.create_invite(credential)
            except UpstreamError:
                raise
            except Exception as e:
                logfire.exception(
                    "Unexpected invite client failure",
                    link_id=link_id,
                    error_type=type(e).__name__,
                )
                raise UpstreamError(None, str(e)) from e

            # max_age=0 ("never expires" upstream) also gets the default
            max_age = invite.max_age or self.settings.default_max_age_seconds
            entry = InviteCacheEntry(
                url=f"{self.settings.invite_base_url}{invite.code}",
                code=invite.code,
                expires_at=self._clock() + timedelta(seconds=max_age),
                max_uses=invite.max_uses,
                uses=invite.uses,
            )
            await self.invite_cache.put(link_id, entry)

            logfire.info(
                "Invite refreshed",
                link_id=link_id,
                code=entry.code,
                expires_at=entry.expires_at.isoformat(),
            )
            return entry
