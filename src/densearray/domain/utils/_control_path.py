"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on an attribute of the
receiving object.

Core idea
---------
- A *base* method is declared on an interface class; its signature and
  docstring become the canonical ones.
- Implementations ("control paths") are registered for that method, each
  keyed by ``(ClassName, MethodName, StateVal)``.
- At call time the installed wrapper reads ``getattr(self, state_attr)`` and
  forwards ``self`` and the call arguments to the matching implementation.

In densearray the state attribute is the array's ``dtype``: real and
complex arrays register separate kernels for the same method, and a dtype
without a registered path fails with the builder's trap exception.

Notes
-----
- Decorating a control path mutates the class: the method name is replaced
  with a dispatching wrapper the first time a path is registered.
- Registered implementations live in a mapping owned by the builder; two
  builders never share paths.
"""

import logging
from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[Callable[..., Any], Any], BaseException]
"""Callable building the exception raised for a missing control path."""

logger = logging.getLogger(__name__)

MethodKey = namedtuple(
    "MethodKey",
    [
        "ClassName",
        "MethodName",
        "StateVal",
    ],
)
"""
Tuple-like key used to uniquely identify a control path.

Fields
------
ClassName : str
    The owning class name.
MethodName : str
    The base method name being templated.
StateVal : Hashable
    The state value that selects this implementation.
"""


def create_path_builder(
    state_attr: str = "_state",
    trap_exception: Optional[TrapFactory] = None,
) -> Callable[..., Callable[[Callable[P, R]], Callable[P, R]]]:
    """
    Create and return a "path builder" used to register control paths.

    The returned function (`templator`) is used like this:

        builder = create_path_builder("mode")

        class MyClass:
            mode = "A"
            def foo(self, x: int) -> int: ...

        @builder(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @builder(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    Calling ``MyClass().foo(1)`` dispatches to ``foo_A`` or ``foo_B``
    depending on ``self.mode``.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute read on ``self`` to select a path.
        Defaults to ``"_state"``.
    trap_exception : Optional[TrapFactory], optional
        Default factory for the error raised when no path matches. It is
        called as ``trap_exception(method, state)`` and must return an
        exception instance. When ``None``, ``NotImplementedError`` is raised.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    default_trap = trap_exception

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method is wrapped for state-based dispatch. The
            wrapper is installed on this class under ``method.__name__``.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            installed wrapper via ``functools.wraps``.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory], optional
            Overrides the builder's default missing-path factory for this
            method.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` and returning it unchanged.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        trap = trap_exception if trap_exception is not None else default_trap
        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of `self`.

                Behavior
                --------
                - If `self` lacks the state attribute, raises
                  `NotImplementedError`.
                - If a matching control path exists, calls it with `self`
                  and returns its result.
                - Otherwise raises the trap exception, or
                  `NotImplementedError` when no trap is configured.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                cur = getattr(self, state_attr)
                sm = methods_map.get(MethodKey(cls.__name__, method.__name__, cur))
                if sm is not None:
                    return sm(self, *args, **kwargs)
                logger.debug(
                    "no control path for %s.%s with %s=%r",
                    cls.__name__,
                    method.__name__,
                    state_attr,
                    cur,
                )
                if trap is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur), repr(method)
                        )
                    )
                raise trap(method, cur)

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
