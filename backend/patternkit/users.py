"""User bookkeeping split into small single-purpose collaborators.

- ``UserManager`` owns the user list (add, delete, update).
- ``UserFinder`` and ``UserPrinter`` read from a manager.
- ``UserController`` turns raw input into a user and hands it to a view;
  wiring it to an actual input source is left to the caller.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
  name: str = Field(..., min_length=1)
  email: str | None = None


class UserManager:
  def __init__(self) -> None:
    self.users: list[User] = []

  def _index(self, user: User) -> int | None:
    # identity, not equality: two users may share a name and email
    return next((i for i, u in enumerate(self.users) if u is user), None)

  def add_user(self, user: User) -> None:
    self.users.append(user)

  def delete_user(self, user: User) -> None:
    index = self._index(user)
    if index is not None:
      del self.users[index]

  def update_user(self, user: User, new_name: str) -> None:
    index = self._index(user)
    if index is not None:
      self.users[index].name = new_name


class UserFinder:
  def __init__(self, user_manager: UserManager) -> None:
    self.user_manager = user_manager

  def get_user_by_name(self, name: str) -> User | None:
    return next((u for u in self.user_manager.users if u.name == name), None)


class UserPrinter:
  def __init__(self, user_manager: UserManager) -> None:
    self.user_manager = user_manager

  def user_names(self) -> list[str]:
    return [u.name for u in self.user_manager.users]


class UserView:
  def render(self, user: User) -> str:
    return f"User: {user.name}"


class UserController:
  def __init__(self, user_manager: UserManager | None = None, view: UserView | None = None) -> None:
    self.user_manager = user_manager or UserManager()
    self.user_view = view or UserView()

  def handle_user_input(self, user_name: str) -> str:
    user = User(name=user_name)
    self.user_manager.add_user(user)
    return self.user_view.render(user)


__all__ = ["User", "UserManager", "UserFinder", "UserPrinter", "UserView", "UserController"]
