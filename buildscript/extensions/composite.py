"""
Wrappers for manifest sections that configure more than one backend.

A section such as::

    publish:
      docker:
        image: acme/app
      s3:
        bucket: releases

becomes one ``CompositePublish`` holding both backends in section order.
"""
from typing import List, Sequence, Tuple

from .base import Deployable, Notifiable, Publishable


class _Composite:
    def __init__(self, members: Sequence[Tuple[str, object]]):
        self._members: Tuple[Tuple[str, object], ...] = tuple(members)

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self._members]

    @property
    def members(self) -> List[object]:
        return [member for _, member in self._members]

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names})"


class CompositePublish(_Composite, Publishable):
    def write(self, buildfile) -> None:
        for _, publisher in self._members:
            publisher.write(buildfile)


class CompositeDeploy(_Composite, Deployable):
    def write(self, buildfile) -> None:
        for _, deployer in self._members:
            deployer.write(buildfile)


class CompositeNotification(_Composite, Notifiable):
    def set(self, context) -> None:
        for _, notifier in self._members:
            notifier.set(context)
