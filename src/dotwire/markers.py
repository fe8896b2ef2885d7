from typing import NamedTuple


class Named(NamedTuple):
    """Pin the symbolic name used to resolve an annotated parameter.

    Attach ``Named`` metadata to ``typing.Annotated`` when the declared type
    of a constructor parameter is not the name it should be resolved by, for
    example an abstract base whose implementation lives under its own name.
    A configured mapping or a ``custom`` override still takes precedence.

    Examples:
        .. code-block:: python

            from typing import Annotated


            class Service:
                def __init__(self, logger: Annotated[Logger, Named("app.file_logger")]) -> None:
                    self.logger = logger

    """

    value: str


__all__ = ["Named"]
