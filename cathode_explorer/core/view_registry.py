from __future__ import annotations
from typing import Dict, List, Type

import pandas as pd

from .base_view import BaseView


class ViewRegistry:
    """
    Lookup table from view id to {@link BaseView} subclass.

    Classes are stored rather than instances: every render builds a fresh view
    around the filtered records of that moment, so no view ever holds on to an
    old selection. Ids must be unique and only BaseView subclasses are accepted.
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Raises:
            TypeError: if view_cls is not a subclass of {@link BaseView}
            ValueError: if a view with same 'id' already exists
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, records: pd.DataFrame) -> BaseView:
        """
        Build the view registered under view_id for the given filtered records.

        Raises:
            KeyError: for an unregistered view_id
        """
        if view_id not in self._views:
            raise KeyError(f"View '{view_id}' not found")
        return self._views[view_id](records)

    def ids(self) -> List[str]:
        return list(self._views)

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._views.values())

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views
