from typing import Callable, Generic, TypeVar

T = TypeVar('T')
U = TypeVar('U')

class Option(Generic[T]):
    """
    A value that may be absent.

    Used where "nothing" is an expected outcome rather than an error, e.g. a
    ray running parallel to a plane. The wrapped item is never None: absence
    is the none() state.

    Prefer match() to reaching into .item, it forces the caller to say what
    happens in both cases.
    """

    __create_key = object()
    __slots__ = ('item',)

    def __init__(self, create_key, item: T = None):
        assert(create_key == Option.__create_key), \
            "Option objects must be created using Option.some or Option.none"

        self.item = item

    @classmethod
    def some(cls, item: T) -> 'Option[T]':
        if item is None:
            raise ValueError("Option.some() needs an item, use Option.none()")
        return cls(cls.__create_key, item)

    @classmethod
    def none(cls) -> 'Option[T]':
        return cls(cls.__create_key)

    def is_some(self) -> bool:
        return self.item is not None

    def is_none(self) -> bool:
        return self.item is None

    def __bool__(self):
        return self.is_some()

    def __repr__(self):
        return f"Option.some({self.item!r})" if self.is_some() else "Option.none()"

    def get(self) -> T:
        if self.is_none():
            raise LookupError("get() called on Option.none()")
        return self.item

    def get_or(self, default: T) -> T:
        return self.item if self.is_some() else default

    def match(self, some_function: Callable[[T], U], none_function: Callable[[], U]) -> U:
        if self.is_some():
            return some_function(self.item)
        return none_function()

    def map(self, map_function: Callable[[T], U]) -> 'Option[U]':
        if self.is_some():
            return Option.some(map_function(self.item))
        return self

    def bind(self, bind_function: Callable[[T], 'Option[U]']) -> 'Option[U]':
        if self.is_some():
            return bind_function(self.item)
        return self

    def tee(self, side_effect_function: Callable[[T], None]) -> 'Option[T]':
        if self.is_some():
            side_effect_function(self.item)
        return self
