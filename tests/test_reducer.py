"""Tests for the slice reducer, the root reducer and the store."""

from __future__ import annotations

from conftest import SKILL_1, SPOT_2, SPOT_3, make_state

from pyroster.entities import SKILL, SPOT, EntityKind
from pyroster.models import Skill, Spot, SpotView
from pyroster.state import actions
from pyroster.state.alert import AlertVariant, show_error_message, show_success_message
from pyroster.state.collection import (
    create_id_map_from_list,
    map_with_element,
    map_with_updated_element,
    map_without_element,
)
from pyroster.state.slice import SliceState, reduce_slice
from pyroster.state.store import AppState, Store, root_reducer

ADDED = Spot(tenant_id=0, id=4321, version=0, name="Spot 1", required_skill_set=[])
UPDATED = Spot(tenant_id=0, id=1234, version=1, name="Updated Spot 2", required_skill_set=[])
DELETED = Spot(tenant_id=0, id=2312, version=0, name="Spot 3", required_skill_set=[])


class TestSpotSliceReducer:
    def setup_method(self) -> None:
        self.spot_list = make_state().spot_list

    def test_set_loading(self) -> None:
        result = reduce_slice(self.spot_list, actions.set_is_loading(SPOT, True))
        assert result == self.spot_list.model_copy(update={"is_loading": True})
        assert result.map_by_id is self.spot_list.map_by_id

    def test_add(self) -> None:
        result = reduce_slice(self.spot_list, actions.add_record(SPOT, ADDED))
        assert result.map_by_id == map_with_element(self.spot_list.map_by_id, ADDED.to_view())
        assert not result.is_loading

    def test_remove(self) -> None:
        result = reduce_slice(self.spot_list, actions.remove_record(SPOT, DELETED))
        assert result.map_by_id == map_without_element(self.spot_list.map_by_id, DELETED)
        assert list(result.map_by_id) == [1234]

    def test_update(self) -> None:
        result = reduce_slice(self.spot_list, actions.update_record(SPOT, UPDATED))
        assert result.map_by_id == map_with_updated_element(self.spot_list.map_by_id, UPDATED.to_view())
        assert result.map_by_id[1234].name == "Updated Spot 2"

    def test_refresh_list(self) -> None:
        result = reduce_slice(self.spot_list, actions.refresh_list(SPOT, [ADDED]))
        assert result.map_by_id == create_id_map_from_list([ADDED.to_view()])

    def test_does_not_mutate_input(self) -> None:
        before = self.spot_list.model_copy(deep=True)
        reduce_slice(self.spot_list, actions.add_record(SPOT, ADDED))
        reduce_slice(self.spot_list, actions.remove_record(SPOT, SPOT_2))
        assert self.spot_list == before

    def test_spot_actions_carry_normalized_records(self) -> None:
        action = actions.add_record(
            SPOT,
            Spot(tenant_id=0, id=5, version=0, name="S", required_skill_set=[SKILL_1]),
        )
        assert action.entity == EntityKind.SPOT
        assert action.record == SpotView(tenant_id=0, id=5, version=0, name="S", required_skill_set=[1])


class TestRootReducer:
    def test_routes_entity_actions_to_their_slice(self) -> None:
        state = make_state()
        new_skill = Skill(tenant_id=0, id=2, version=0, name="Skill 2")
        result = root_reducer(state, actions.add_record(SKILL, new_skill))
        assert result.skill_list.map_by_id == {1: SKILL_1, 2: new_skill}
        assert result.spot_list is state.spot_list

    def test_loading_flags_are_per_slice(self) -> None:
        result = root_reducer(make_state(), actions.set_is_loading(SKILL, True))
        assert result.skill_list.is_loading
        assert not result.spot_list.is_loading

    def test_alerts_are_appended(self) -> None:
        state = root_reducer(make_state(), show_success_message("addSpot", {"name": "X"}))
        state = root_reducer(state, show_error_message("removeSpotError", {"name": "Y"}))
        assert [(a.variant, a.message_key, a.params) for a in state.alerts] == [
            (AlertVariant.SUCCESS, "addSpot", {"name": "X"}),
            (AlertVariant.ERROR, "removeSpotError", {"name": "Y"}),
        ]

    def test_change_tenant_clears_collections(self) -> None:
        result = root_reducer(make_state(), actions.change_tenant(7))
        assert result.tenant_data.current_tenant_id == 7
        assert result.spot_list == SliceState()
        assert result.skill_list == SliceState()

    def test_unknown_action_leaves_state_unchanged(self) -> None:
        class _Unrecognized:
            kind = "unrecognized"

        state = make_state()
        assert root_reducer(state, _Unrecognized()) is state  # type: ignore[arg-type]

        store = Store(state)
        store.dispatch(_Unrecognized())  # type: ignore[arg-type]
        assert store.state is state


class TestStore:
    def test_default_state_is_empty(self) -> None:
        store = Store()
        assert store.get_state() == AppState()
        assert store.state.spot_list.map_by_id == {}

    def test_dispatch_replaces_state_and_notifies(self) -> None:
        store = Store(make_state())
        before = store.state
        seen: list[tuple[object, AppState]] = []
        store.subscribe(lambda action: seen.append((action, store.state)))

        action = actions.remove_record(SPOT, SPOT_3)
        assert store.dispatch(action) is action

        assert store.state is not before
        assert 2312 in before.spot_list.map_by_id
        assert seen == [(action, store.state)]

    def test_unsubscribe(self) -> None:
        store = Store()
        seen: list[object] = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        store.dispatch(actions.set_is_loading(SPOT, True))
        assert seen == []

    def test_failing_listener_does_not_abort_dispatch(self) -> None:
        store = Store()
        seen: list[object] = []

        def _boom(_action: object) -> None:
            raise RuntimeError("listener failure")

        store.subscribe(_boom)
        store.subscribe(seen.append)
        store.dispatch(actions.set_is_loading(SPOT, True))
        assert store.state.spot_list.is_loading
        assert len(seen) == 1
