"""HTTP API client for the Puppy Bowl roster API."""

from typing import Optional, Union
import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)
from rich.console import Console
from rich.markup import escape

from puppy_bowl.config import Config
from puppy_bowl.models.player import Player, PlayerInput
from puppy_bowl.models.result import ApiResult, FailureReason

console = Console(stderr=True)


class MalformedResponseError(ValueError):
    """Raised when a response body does not have the expected shape."""


def _extract(payload, *keys: str):
    """Walk nested dict keys, raising MalformedResponseError on any miss."""
    node = payload
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            raise MalformedResponseError(f"missing '{'.'.join(keys)}' in response body")
        node = node[key]
    return node


class PuppyBowlAPIClient:
    """Async client for the cohort's player endpoints.

    Every operation has two forms. The ``*_result`` form returns an
    :class:`ApiResult` carrying the failure reason. The plain form collapses
    that result to a safe default (empty list, ``None`` or ``False``) so a
    failed request looks exactly like "nothing there" to the caller.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_backoff: float = 0.5,
        verbose: bool = False
    ):
        self.config = config or Config()
        self.retry_backoff = retry_backoff
        self.verbose = verbose
        self.client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            transport=transport
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _trace(self, message: str) -> None:
        if self.verbose:
            console.print(f"[blue]{escape(message)}[/blue]")

    def _fail(self, result: ApiResult, message: str) -> ApiResult:
        console.print(f"[red]{escape(message)}: {result.reason.value} {escape(result.detail)}[/red]")
        return result

    async def _get(self, path: str) -> httpx.Response:
        """GET with retries on transport errors only."""
        response = None
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(1, self.config.retry_attempts)),
            wait=wait_exponential(multiplier=self.retry_backoff, max=8),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True
        ):
            with attempt:
                response = await self.client.get(path)
        return response

    async def _call(self, method: str, path: str, **kwargs) -> Union[httpx.Response, ApiResult]:
        """Send one request, mapping transport errors and bad statuses to failures."""
        try:
            if method == "GET":
                response = await self._get(path)
            else:
                response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            return ApiResult.failure(FailureReason.TRANSPORT, str(e) or type(e).__name__)

        if not response.is_success:
            return ApiResult.failure(
                FailureReason.HTTP_STATUS,
                f"HTTP {response.status_code}",
                status_code=response.status_code
            )
        return response

    @staticmethod
    def _parse(response: httpx.Response, *keys: str, many: bool = False) -> ApiResult:
        try:
            node = _extract(response.json(), *keys)
            if many:
                if not isinstance(node, list):
                    raise MalformedResponseError(f"'{'.'.join(keys)}' is not a list")
                value = [Player.from_api_response(item) for item in node]
            else:
                if not isinstance(node, dict):
                    raise MalformedResponseError(f"'{'.'.join(keys)}' is not an object")
                value = Player.from_api_response(node)
        except (ValueError, ValidationError) as e:
            return ApiResult.failure(
                FailureReason.MALFORMED_BODY, str(e), status_code=response.status_code
            )
        return ApiResult.success(value, status_code=response.status_code)

    async def list_players_result(self) -> ApiResult:
        """Fetch all players in the cohort."""
        outcome = await self._call("GET", "/players")
        if isinstance(outcome, ApiResult):
            return self._fail(outcome, "Uh oh, trouble fetching players!")

        result = self._parse(outcome, "data", "players", many=True)
        if not result.ok:
            return self._fail(result, "Uh oh, trouble fetching players!")

        self._trace(f"Fetched {len(result.value)} players")
        return result

    async def get_player_result(self, player_id: int) -> ApiResult:
        """Fetch a single player by id."""
        outcome = await self._call("GET", f"/players/{player_id}")
        if isinstance(outcome, ApiResult):
            return self._fail(outcome, f"Oh no, trouble fetching player #{player_id}!")

        result = self._parse(outcome, "data", "player")
        if not result.ok:
            return self._fail(result, f"Oh no, trouble fetching player #{player_id}!")

        self._trace(f"Fetched player #{player_id}")
        return result

    async def create_player_result(self, candidate: Union[PlayerInput, dict]) -> ApiResult:
        """Send a new player to the API. No local validation is done here."""
        payload = candidate.to_payload() if isinstance(candidate, PlayerInput) else dict(candidate)
        self._trace(f"Adding player {payload.get('name')!r}")

        outcome = await self._call("POST", "/players", json=payload)
        if isinstance(outcome, ApiResult):
            return self._fail(outcome, "Oops, something went wrong with adding that player!")

        result = self._parse(outcome, "data", "newPlayer")
        if not result.ok:
            return self._fail(result, "Oops, something went wrong with adding that player!")
        return result

    async def delete_player_result(self, player_id: int) -> ApiResult:
        """Remove a player from the roster."""
        outcome = await self._call("DELETE", f"/players/{player_id}")
        if isinstance(outcome, ApiResult):
            return self._fail(outcome, f"Whoops, trouble removing player #{player_id} from the roster!")

        self._trace(f"Player #{player_id} has been removed successfully.")
        return ApiResult.success(True, status_code=outcome.status_code)

    async def list_players(self) -> list[Player]:
        """All players, or an empty list if anything went wrong."""
        return (await self.list_players_result()).unwrap_or([])

    async def get_player(self, player_id: int) -> Optional[Player]:
        """One player, or None if anything went wrong."""
        return (await self.get_player_result(player_id)).unwrap_or(None)

    async def create_player(self, candidate: Union[PlayerInput, dict]) -> Optional[Player]:
        """The created player with its server-assigned id, or None on failure."""
        return (await self.create_player_result(candidate)).unwrap_or(None)

    async def delete_player(self, player_id: int) -> bool:
        """True only when the API reports success."""
        return (await self.delete_player_result(player_id)).unwrap_or(False)
