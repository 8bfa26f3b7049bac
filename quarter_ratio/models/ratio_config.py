"""Distribution configuration model"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from quarter_ratio.exceptions import ConfigMismatchError, InvalidConfigError

REMAINDER_STRATEGIES = ('floor', 'ceil', 'round', 'none')

MISMATCH_MESSAGE = (
    'DistributedRatio -> The default ratios defined do not match '
    'the number of quarters defined.'
)


@dataclass(frozen=True)
class DistributedRatioConfig:
    """
    Immutable settings for a DistributedRatio.

    When qtr_defaults is not given it is derived as number_of_qtrs equal
    shares. Construction fails when the two disagree.
    """

    number_of_qtrs: int = 4
    qtr_defaults: Optional[Tuple[float, ...]] = None
    qtr_val_key: str = 'value'
    remainder_strategy: str = 'floor'

    def __post_init__(self):
        if isinstance(self.number_of_qtrs, bool) or not isinstance(self.number_of_qtrs, int) \
                or self.number_of_qtrs < 1:
            raise InvalidConfigError(
                f'number_of_qtrs must be a positive integer, got {self.number_of_qtrs!r}'
            )
        if self.remainder_strategy not in REMAINDER_STRATEGIES:
            raise InvalidConfigError(
                f'Unknown remainder_strategy {self.remainder_strategy!r}, '
                f'expected one of {", ".join(REMAINDER_STRATEGIES)}'
            )
        if not self.qtr_val_key:
            raise InvalidConfigError('qtr_val_key must be a non-empty string')

        if self.qtr_defaults is None:
            defaults = tuple(1 / self.number_of_qtrs for _ in range(self.number_of_qtrs))
        else:
            try:
                defaults = tuple(float(ratio) for ratio in self.qtr_defaults)
            except (TypeError, ValueError) as e:
                raise InvalidConfigError(f'qtr_defaults must be numbers, got {self.qtr_defaults!r}') from e
        object.__setattr__(self, 'qtr_defaults', defaults)

        if len(defaults) != self.number_of_qtrs:
            raise ConfigMismatchError(MISMATCH_MESSAGE)

    @classmethod
    def from_settings(cls, number_of_qtrs: int = None, qtr_defaults: Sequence[float] = None,
                      qtr_val_key: str = None, remainder_strategy: str = None) -> 'DistributedRatioConfig':
        """Build a config from config.py settings, overridden by any argument given"""
        from quarter_ratio import config as settings
        # configured defaults only fit the configured quarter count
        if qtr_defaults is None and number_of_qtrs is None:
            qtr_defaults = parse_ratios(settings.QTR_DEFAULTS)
        return cls(
            number_of_qtrs=number_of_qtrs if number_of_qtrs is not None
            else parse_count(settings.NUMBER_OF_QTRS),
            qtr_defaults=qtr_defaults,
            qtr_val_key=qtr_val_key or settings.QTR_VAL_KEY,
            remainder_strategy=remainder_strategy or settings.REMAINDER_STRATEGY,
        )

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'number_of_qtrs': self.number_of_qtrs,
            'qtr_defaults': list(self.qtr_defaults),
            'qtr_val_key': self.qtr_val_key,
            'remainder_strategy': self.remainder_strategy,
        }


def parse_count(raw) -> int:
    """Parse the configured number of quarters, e.g. '6'"""
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as e:
        raise InvalidConfigError(f'number_of_qtrs must be a positive integer, got {raw!r}') from e


def parse_ratios(raw) -> Optional[Tuple[float, ...]]:
    """Parse a comma separated list of ratios, e.g. '.1,.2,.2,.2,.2,.1'"""
    if raw is None:
        return None
    if not isinstance(raw, str):
        return tuple(raw)
    if not raw.strip():
        return None
    try:
        return tuple(float(part) for part in raw.split(',') if part.strip())
    except ValueError as e:
        raise InvalidConfigError(f'qtr_defaults must be comma separated numbers, got {raw!r}') from e
