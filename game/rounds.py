"""Round generation: the target label and its decoys."""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import config
from game.difficulty import DecoyStrategy, round_policy
from game.errors import RoundGenerationError


@dataclass(frozen=True)
class Label:
    """A color and shape pair identifying one image option."""
    color: str
    shape: str

    @property
    def name(self) -> str:
        return f"{self.color} {self.shape}"

    @property
    def image_name(self) -> str:
        return f"{self.name}.png"

    @classmethod
    def parse(cls, name: str) -> 'Label':
        """Build a label from its "<Color> <Shape>" name (".png" optional)."""
        if name.endswith('.png'):
            name = name[:-len('.png')]
        color, _, shape = name.partition(' ')
        if color not in config.COLORS or shape not in config.SHAPES:
            raise ValueError(f"Unknown label: {name!r}")
        return cls(color, shape)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Round:
    """One round: the label to find and the options shown to the player."""
    target: Label
    options: Tuple[Label, ...]


def _take(pool: List[str], rng: random.Random) -> str:
    """Remove and return a random value from the pool."""
    return pool.pop(rng.randrange(len(pool)))


class RoundGenerator:
    """Builds rounds, applying the difficulty policy for the round count."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, rounds_completed: int, strategy: Optional[DecoyStrategy] = None) -> Round:
        """
        Generate the round that starts after ``rounds_completed`` rounds.

        Args:
            rounds_completed: Rounds resolved so far in the session
            strategy: Decoy strategy already chosen by the caller (looked up if omitted)

        Returns:
            Round with 4 distinct options, exactly one of them the target
        """
        if strategy is None:
            strategy = round_policy(rounds_completed).decoy_strategy

        available_colors = list(config.COLORS)
        available_shapes = list(config.SHAPES)

        target = Label(_take(available_colors, self.rng), _take(available_shapes, self.rng))

        if strategy is DecoyStrategy.SAME_SHAPE_FAMILY:
            options = self._same_shape_family(target, available_colors, available_shapes)
        else:
            options = self._random(target, available_colors, available_shapes)

        if len(set(options)) != config.OPTIONS_PER_ROUND or options.count(target) != 1:
            raise RoundGenerationError(f"Invalid options for target {target}: {options}")

        self.rng.shuffle(options)
        return Round(target=target, options=tuple(options))

    def _same_shape_family(
        self,
        target: Label,
        available_colors: List[str],
        available_shapes: List[str]
    ) -> List[Label]:
        """One decoy sharing the target's shape, the rest fully unused."""
        options = [target]
        if available_colors:
            options.append(Label(_take(available_colors, self.rng), target.shape))

        while len(options) < config.OPTIONS_PER_ROUND:
            if not available_colors or not available_shapes:
                # Palettes too small for unique decoys, fall back to sampling
                return self._random(target, available_colors, available_shapes, options)
            options.append(Label(_take(available_colors, self.rng), _take(available_shapes, self.rng)))

        return options

    def _random(
        self,
        target: Label,
        available_colors: List[str],
        available_shapes: List[str],
        options: Optional[List[Label]] = None
    ) -> List[Label]:
        """Draw labels, preferring unused values, until 4 distinct are collected."""
        options = list(options or [target])

        attempts = 0
        while len(options) < config.OPTIONS_PER_ROUND:
            attempts += 1
            if attempts > config.MAX_DECOY_ATTEMPTS:
                raise RoundGenerationError(
                    f"Could not find {config.OPTIONS_PER_ROUND} distinct options "
                    f"after {config.MAX_DECOY_ATTEMPTS} attempts"
                )

            shape = _take(available_shapes, self.rng) if available_shapes else self.rng.choice(config.SHAPES)
            color = _take(available_colors, self.rng) if available_colors else self.rng.choice(config.COLORS)

            label = Label(color, shape)
            if label not in options:
                options.append(label)

        return options
