"""User directory screens: home, list/search, add, edit, delete."""
from __future__ import annotations
import logging

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from crud_app.api.helpers.feedback import FlashNotifier, FormConfirmation, RedirectNavigator
from crud_app.core.api import ApiError, NotFoundError, UserService
from crud_app.core.feedback import USERS_PATH, NeverConfirm
from crud_app.core.form_controller import FormController
from crud_app.core.list_controller import ListController

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__)


def _service() -> UserService:
    return current_app.config["USER_SERVICE"]


def _list_controller(confirmation=None) -> ListController:
    controller = ListController(
        _service(),
        FlashNotifier(),
        confirmation or NeverConfirm(),
    )
    controller.set_search_term(request.values.get("q", ""))
    return controller


def _render_list(controller: ListController):
    return render_template(
        "users.html",
        title="Users Management",
        users=controller.filtered(),
        search_term=controller.search_term,
    )


def _render_form(form: FormController, navigator: RedirectNavigator):
    """Run a posted form through the controller and redirect or re-render."""
    status = 200
    if request.method == "POST":
        if "cancel" in request.form:
            form.cancel()
        else:
            form.update(request.form.to_dict())
            form.submit()
            if form.field_errors:
                status = 400

    if navigator.target:
        return redirect(navigator.target)

    return render_template(
        "user_form.html",
        title="Edit User" if form.is_edit else "Add New User",
        draft=form.draft.as_form(),
        errors=form.field_errors,
        is_edit=form.is_edit,
        user_id=form.user_id,
    ), status


@bp.route("/")
def home():
    return render_template("home.html", title="Home")


@bp.route("/users")
def list_users():
    controller = _list_controller()
    controller.fetch()
    return _render_list(controller)


@bp.route("/users/refresh", methods=["POST"])
def refresh_users():
    controller = _list_controller()
    controller.refresh()
    return redirect(url_for("users.list_users", q=controller.search_term or None))


@bp.route("/users/<user_id>/delete", methods=["POST"])
def delete_user(user_id: str):
    controller = _list_controller(FormConfirmation(request.form))
    controller.remove(user_id)
    return redirect(USERS_PATH)


@bp.route("/add-user", methods=["GET", "POST"])
def add_user():
    navigator = RedirectNavigator()
    form = FormController.for_create(_service(), FlashNotifier(), navigator)
    return _render_form(form, navigator)


@bp.route("/edit-user/<user_id>", methods=["GET", "POST"])
def edit_user(user_id: str):
    notifier = FlashNotifier()
    navigator = RedirectNavigator()

    if request.method == "POST":
        # The posted fields replace the whole draft, no need to reload the user
        form = FormController(_service(), notifier, navigator, user_id=user_id)
        return _render_form(form, navigator)

    try:
        user = _service().get_user(user_id)
    except NotFoundError:
        notifier.notify_error("User not found")
        return redirect(USERS_PATH)
    except ApiError as exc:
        logger.error("Error loading user %s: %s", user_id, exc)
        notifier.notify_error("Failed to fetch user")
        return redirect(USERS_PATH)

    form = FormController.for_edit(user, _service(), notifier, navigator)
    return _render_form(form, navigator)
