"""
CLI commands for user profiles
"""
from typing import Dict

from stock_tracker.cli.commands.common import confirm_delete
from stock_tracker.cli.output import console, escape, notify
from stock_tracker.config import Configuration
from stock_tracker.core.exceptions import (
    InsertConflictError,
    KeyNotFoundError,
    RemoveFailedError,
)
from stock_tracker.logger import logger
from stock_tracker.models.user import User, UserProperty
from stock_tracker.repositories import MapRepository
from stock_tracker.services import SessionService


def create_user(config: Configuration) -> None:
    """
    Add a default user profile keyed by the given username
    """
    username = config.args[0]
    user = User.from_username(username)

    def insert(users: Dict[str, User]) -> None:
        if username in users:
            raise InsertConflictError(username)
        users[username] = user

    MapRepository.modify(config.user_map_path, User, insert)

    logger.info(f"User created: {username}")
    notify(f"User {escape(username)} has been added.")


def delete_user(config: Configuration) -> None:
    """
    Delete a user profile after confirmation on stdin
    """
    username = config.args[0]

    if username not in MapRepository.load(config.user_map_path, User):
        raise KeyNotFoundError(username)

    if not confirm_delete("user profile", username):
        logger.debug(f"Deletion of user {username} declined")
        return

    def remove(users: Dict[str, User]) -> None:
        if users.pop(username, None) is None:
            raise RemoveFailedError(username)

    MapRepository.modify(config.user_map_path, User, remove)

    logger.info(f"User deleted: {username}")
    notify(f"User {escape(username)} deleted.")


def edit_user(config: Configuration) -> None:
    """
    Set one property of a user; a username change renames the store key

    If the renamed user is the one logged in, the session follows the
    new name.
    """
    username, property_name, value = config.args[:3]
    renamed = False
    note = ""

    def apply(users: Dict[str, User]) -> None:
        nonlocal renamed, note
        user = users.get(username)
        if user is None:
            raise KeyNotFoundError(username)

        prop = User.resolve_property(property_name)

        if prop is UserProperty.USERNAME:
            if value != username and value in users:
                raise InsertConflictError(value)
            user.set_property(prop, value)
            del users[username]
            users[value] = user
            renamed = value != username
            note = f"User {username} changed to {value}."
        else:
            user.set_property(prop, value)
            label = prop.value.replace("_", " ")
            note = f"User {username}'s {label} changed to {value}."

    MapRepository.modify(config.user_map_path, User, apply)

    if renamed:
        session = SessionService.initialize(config.state_path)
        if session.current_user == username:
            session.set_user(value)
            logger.info(f"Session user renamed from {username} to {value}")

    logger.info(note)
    notify(escape(note))


def list_users(config: Configuration) -> None:
    """
    Print every user, sorted by username
    """
    users = MapRepository.load(config.user_map_path, User)

    if not users:
        console.print("No users created.")
        return

    console.print("List of users:")
    for username in sorted(users):
        console.print(escape(str(users[username])))
