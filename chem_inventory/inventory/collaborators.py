"""User-facing collaborators the inventory manager depends on."""

from typing import Protocol


class Notifier(Protocol):
    """Shows an alert to the user (validation errors)."""

    def alert(self, title: str, message: str) -> None:
        ...


class ConfirmDialog(Protocol):
    """Asks the user to confirm a destructive action."""

    def confirm(
        self,
        title: str,
        message: str,
        *,
        confirm_label: str,
        cancel_label: str,
    ) -> bool:
        """Return True only when the user picked the confirm (destructive) choice."""
        ...
