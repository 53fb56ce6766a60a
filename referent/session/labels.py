"""Human-readable labels for artifact actions."""

from referent.enums import ArtifactAction

ACTION_LABELS: dict[ArtifactAction, str] = {
    ArtifactAction.SUMMARY: "О чем статья?",
    ArtifactAction.THESES: "Тезисы",
    ArtifactAction.TELEGRAM: "Пост для Telegram",
}

_LABEL_TO_ACTION = {label: action for action, label in ACTION_LABELS.items()}


def action_from_label(label: str) -> ArtifactAction:
    """Map a button label back to its action.

    :param label: The displayed label.
    :returns: The matching action.
    :raises KeyError: If the label is unknown.
    """
    return _LABEL_TO_ACTION[label.strip()]
