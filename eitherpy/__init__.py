from .either import (
    Either,
    Left,
    Right,
    left,
    right,
    pack,
    is_none,
    is_either,
    is_left,
    is_right,
    from_nullable,
    attempt,
)
from .collect import sequence, traverse, map2, lefts, rights, partition
from .logger import ConsoleLogger
from .instrument import instrument
