from utils import Color, PALETTE, RandomSource


class ColorPermutation:
    """
    A bijection over the palette, stored as the image of RED, GREEN, BLUE
    in that order.
    """

    def __init__(self, colors: [Color]):
        if sorted(c.value for c in colors) != [0, 1, 2]:
            raise ValueError(f'not a permutation of the palette: {colors}')
        self.colors = list(colors)

    @classmethod
    def new_random(cls, rng: RandomSource = None) -> 'ColorPermutation':
        rng = RandomSource() if rng is None else rng
        perm = list(PALETTE)
        rng.shuffle(perm)
        return cls(perm)

    def __call__(self, color: Color) -> Color:
        return self.colors[color.value]

    def inverse(self) -> 'ColorPermutation':
        inv = [None] * 3
        for c in PALETTE:
            inv[self(c).value] = c
        return ColorPermutation(inv)

    def __eq__(self, other):
        return isinstance(other, ColorPermutation) and self.colors == other.colors

    def __hash__(self):
        return hash(tuple(self.colors))

    def __repr__(self):
        return f'ColorPermutation({[c.name for c in self.colors]})'
