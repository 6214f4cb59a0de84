from __future__ import annotations

import json
from typing import IO, Any

import pytest

from pyroster.exceptions import RosterTransportError
from pyroster.models import Skill, SpotView
from pyroster.state.slice import SliceState
from pyroster.state.store import Action, AppState, Store, TenantData


class FakeRestClient:
    """In-memory transport: canned answers per path (and body), recorded calls.

    An answer that is an exception instance is raised instead of returned.
    """

    def __init__(self) -> None:
        self.get_answers: dict[str, Any] = {}
        self.post_answers: dict[str, Any] = {}
        self.put_answers: dict[str, Any] = {}
        self.delete_answers: dict[str, Any] = {}
        self.calls: list[tuple[str, str, Any]] = []

    @staticmethod
    def _key(path: str, body: Any) -> str:
        return path + json.dumps(body, sort_keys=True)

    def on_get(self, path: str, answer: Any) -> None:
        self.get_answers[path] = answer

    def on_post(self, path: str, body: Any, answer: Any) -> None:
        self.post_answers[self._key(path, body)] = answer

    def on_put(self, path: str, body: Any, answer: Any) -> None:
        self.put_answers[self._key(path, body)] = answer

    def on_delete(self, path: str, answer: Any) -> None:
        self.delete_answers[path] = answer

    def calls_to(self, method: str) -> list[tuple[str, Any]]:
        return [(path, body) for m, path, body in self.calls if m == method]

    @staticmethod
    def _answer(answers: dict[str, Any], key: str) -> Any:
        if key not in answers:
            raise RosterTransportError(f"No canned answer for {key}", status_code=404, endpoint=key)
        answer = answers[key]
        if isinstance(answer, BaseException):
            raise answer
        return answer

    async def get(self, path: str) -> Any:
        self.calls.append(("get", path, None))
        return self._answer(self.get_answers, path)

    async def post(self, path: str, body: Any) -> Any:
        self.calls.append(("post", path, body))
        return self._answer(self.post_answers, self._key(path, body))

    async def put(self, path: str, body: Any) -> Any:
        self.calls.append(("put", path, body))
        return self._answer(self.put_answers, self._key(path, body))

    async def delete(self, path: str) -> bool:
        self.calls.append(("delete", path, None))
        return self._answer(self.delete_answers, path)

    async def upload_file(self, path: str, file: bytes | IO[bytes], *, filename: str = "file") -> Any:
        self.calls.append(("upload_file", path, filename))
        return self._answer(self.post_answers, self._key(path, filename))


class RecordingStore(Store):
    """Store that remembers every dispatched action, in order."""

    def __init__(self, initial_state: AppState | None = None) -> None:
        super().__init__(initial_state)
        self.actions: list[Action] = []
        self.subscribe(self.actions.append)


SKILL_1 = Skill(tenant_id=0, id=1, version=0, name="Skill 1")
SPOT_2 = SpotView(tenant_id=0, id=1234, version=1, name="Spot 2", required_skill_set=[1])
SPOT_3 = SpotView(tenant_id=0, id=2312, version=0, name="Spot 3", required_skill_set=[])


def make_state(*, spot_loading: bool = False, skill_loading: bool = False) -> AppState:
    return AppState(
        tenant_data=TenantData(current_tenant_id=0),
        spot_list=SliceState(is_loading=spot_loading, map_by_id={1234: SPOT_2, 2312: SPOT_3}),
        skill_list=SliceState(is_loading=skill_loading, map_by_id={1: SKILL_1}),
    )


@pytest.fixture
def app_state() -> AppState:
    return make_state()


@pytest.fixture
def store(app_state: AppState) -> RecordingStore:
    return RecordingStore(app_state)


@pytest.fixture
def client() -> FakeRestClient:
    return FakeRestClient()
