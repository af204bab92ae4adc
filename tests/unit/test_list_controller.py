"""Tests for the users list controller."""
import pytest

from crud_app.core.api import NotFoundError, RequestError
from crud_app.core.feedback import AlwaysConfirm, NeverConfirm
from crud_app.core.list_controller import DELETE_CONFIRM_MESSAGE, ListController


@pytest.fixture()
def controller(service, notifier):
    return ListController(service, notifier, AlwaysConfirm())


@pytest.fixture()
def ann_and_bob(make_user):
    return [
        make_user("1", "Ann", "ann@example.com", 30, "Engineer"),
        make_user("2", "Bob", "bob@mail.org", 41, "Designer"),
    ]


class TestFetch:
    def test_replaces_users_and_clears_loading(self, controller, service, ann_and_bob):
        seen = {}

        def list_users():
            seen["loading"] = controller.loading
            return ann_and_bob

        service.list_users.side_effect = list_users

        assert controller.fetch() is True
        assert seen["loading"] is True
        assert controller.loading is False
        assert controller.users == ann_and_bob

    def test_failure_notifies_and_keeps_users(self, controller, service, notifier, ann_and_bob):
        controller.users = ann_and_bob
        service.list_users.side_effect = RequestError(None)

        assert controller.fetch() is False
        assert controller.loading is False
        assert controller.users == ann_and_bob
        notifier.notify_error.assert_called_once_with("Failed to fetch users")
        notifier.notify_success.assert_not_called()

    def test_unexpected_error_still_clears_loading(self, controller, service):
        service.list_users.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            controller.fetch()
        assert controller.loading is False


class TestRefresh:
    def test_success_notifies_and_uses_refreshing_flag(self, controller, service, notifier, ann_and_bob):
        flags = {}

        def list_users():
            flags.update(loading=controller.loading, refreshing=controller.refreshing)
            return ann_and_bob

        service.list_users.side_effect = list_users

        assert controller.refresh() is True
        assert flags == {"loading": False, "refreshing": True}
        assert controller.refreshing is False
        notifier.notify_success.assert_called_once_with("Users refreshed!")

    def test_failure_does_not_report_success(self, controller, service, notifier):
        service.list_users.side_effect = RequestError("down")

        assert controller.refresh() is False
        assert controller.refreshing is False
        notifier.notify_success.assert_not_called()
        notifier.notify_error.assert_called_once_with("Failed to fetch users")

    def test_success_reported_even_when_data_unchanged(self, controller, service, notifier, ann_and_bob):
        service.list_users.return_value = ann_and_bob
        controller.fetch()
        controller.refresh()
        notifier.notify_success.assert_called_once_with("Users refreshed!")

    def test_stale_response_is_discarded(self, controller, service, make_user):
        old = [make_user("1", "Old")]
        new = [make_user("2", "New")]
        responses = iter([old, new])

        def list_users():
            result = next(responses)
            if result is old:
                # A second load is issued and resolves while the first is in flight
                controller.refresh()
            return result

        service.list_users.side_effect = list_users

        controller.fetch()

        assert controller.users == new


class TestRemove:
    def test_removes_by_id_without_refetch(self, controller, service, notifier, ann_and_bob):
        controller.users = list(ann_and_bob)

        assert controller.remove("1") is True

        service.delete_user.assert_called_once_with("1")
        service.list_users.assert_not_called()
        assert [user.id for user in controller.users] == ["2"]
        notifier.notify_success.assert_called_once_with("User deleted successfully!")

    def test_length_decreases_by_one(self, controller, ann_and_bob):
        controller.users = list(ann_and_bob)
        before = len(controller.users)
        controller.remove("2")
        assert len(controller.users) == before - 1
        assert all(user.id != "2" for user in controller.users)

    def test_declined_confirmation_makes_no_call(self, service, notifier, ann_and_bob):
        controller = ListController(service, notifier, NeverConfirm())
        controller.users = list(ann_and_bob)

        assert controller.remove("1") is False

        service.delete_user.assert_not_called()
        notifier.notify_success.assert_not_called()
        notifier.notify_error.assert_not_called()
        assert controller.users == ann_and_bob

    def test_confirmation_message(self, service, notifier):
        asked = []

        class Recorder:
            def confirm(self, message):
                asked.append(message)
                return False

        ListController(service, notifier, Recorder()).remove("1")
        assert asked == [DELETE_CONFIRM_MESSAGE]

    @pytest.mark.parametrize("error", [NotFoundError(None), RequestError("boom", 500)])
    def test_failure_leaves_users_unchanged(self, controller, service, notifier, ann_and_bob, error):
        controller.users = list(ann_and_bob)
        service.delete_user.side_effect = error

        assert controller.remove("1") is False

        assert controller.users == ann_and_bob
        notifier.notify_error.assert_called_once_with("Failed to delete user")


class TestFiltered:
    def test_empty_term_returns_everything(self, controller, ann_and_bob):
        controller.users = ann_and_bob
        assert controller.filtered() == ann_and_bob

    def test_case_insensitive_name_match(self, controller, service, make_user):
        service.list_users.return_value = [make_user("1", "Ann")]
        controller.fetch()
        controller.set_search_term("ann")
        assert [user.id for user in controller.filtered()] == ["1"]

    @pytest.mark.parametrize("term, ids", [("MAIL.ORG", ["2"]), ("design", ["2"]), ("engineer", ["1"]), ("zzz", [])])
    def test_matches_email_and_profession(self, controller, ann_and_bob, term, ids):
        controller.users = ann_and_bob
        controller.set_search_term(term)
        assert [user.id for user in controller.filtered()] == ids

    def test_does_not_match_age(self, controller, ann_and_bob):
        controller.users = ann_and_bob
        controller.set_search_term("30")
        assert controller.filtered() == []

    def test_is_pure_and_never_mutates(self, controller, ann_and_bob):
        controller.users = ann_and_bob
        controller.set_search_term("bob")
        first = controller.filtered()
        second = controller.filtered()
        assert first == second
        assert controller.users == ann_and_bob
        first.clear()
        assert len(controller.filtered()) == 1

    def test_follows_search_term_changes(self, controller, ann_and_bob):
        controller.users = ann_and_bob
        controller.set_search_term("bob")
        assert len(controller.filtered()) == 1
        controller.set_search_term(None)
        assert len(controller.filtered()) == 2
