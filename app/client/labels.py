from typing import List

from app.api.labels.schemas import LabelOut


def toggle_labels(labels: List[LabelOut], target: LabelOut) -> List[LabelOut]:
    """Return ``labels`` without ``target`` if it is present (by id), else with it appended."""
    if any(label.id == target.id for label in labels):
        return [label for label in labels if label.id != target.id]
    return [*labels, target]
