#permutation.py

import numpy as np
import constants as C
import logger as log

U32_MASK = 0xFFFFFFFF

def _rotate_left(value, shift):
    return ((value << shift) | (value >> (64 - shift))) & C.SEED_MASK

def splitmix64(state):
    """
    Advances a SplitMix64 state by one step.

    Returns:
        (new_state, output), both unsigned 64-bit ints.
    """
    state = (state + C.SPLITMIX_INCREMENT) & C.SEED_MASK
    z = state
    z = ((z ^ (z >> 30)) * C.SPLITMIX_MULTIPLIER_1) & C.SEED_MASK
    z = ((z ^ (z >> 27)) * C.SPLITMIX_MULTIPLIER_2) & C.SEED_MASK
    return state, z ^ (z >> 31)

def expand_seed(seed):
    """Expands a 64-bit seed into the four state words of a SmallRng."""
    state = seed & C.SEED_MASK
    words = []
    for _ in range(C.XOSHIRO_STATE_WORDS):
        state, word = splitmix64(state)
        words.append(word)
    return words


class SmallRng:
    """
    xoshiro256++ generator.

    The algorithm is fixed here rather than borrowed from numpy so that a
    seed produces the same table on every platform and library version.
    """
    def __init__(self, state):
        if len(state) != C.XOSHIRO_STATE_WORDS:
            raise ValueError(f"SmallRng needs {C.XOSHIRO_STATE_WORDS} state words, got {len(state)}")
        # An all-zero state would only ever produce zeros.
        if not any(state):
            state = expand_seed(0)
        self.s = [word & C.SEED_MASK for word in state]

    @classmethod
    def from_seed(cls, seed):
        return cls(expand_seed(seed))

    def next_u64(self):
        s = self.s
        result = (_rotate_left((s[0] + s[3]) & C.SEED_MASK, 23) + s[0]) & C.SEED_MASK
        t = (s[1] << 17) & C.SEED_MASK

        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotate_left(s[3], 45)
        return result

    def next_u32(self):
        # The low bits have linear dependencies, so take the high half.
        return self.next_u64() >> 32

    def below(self, bound):
        """
        Returns a uniform int in [0, bound) using a widening multiply with
        rejection. bound must lie in [1, 2**32).
        """
        if not 0 < bound <= U32_MASK:
            raise ValueError(f"bound must be in [1, 2**32), got {bound}")
        leading_zeros = 32 - bound.bit_length()
        zone = ((bound << leading_zeros) - 1) & U32_MASK
        while True:
            wide = self.next_u32() * bound
            if (wide & U32_MASK) <= zone:
                return wide >> 32

    def shuffle(self, values):
        """Fisher-Yates shuffle in place, walking from the last element down."""
        for i in range(len(values) - 1, 0, -1):
            j = self.below(i + 1)
            values[i], values[j] = values[j], values[i]


def build_permutation_table(seed):
    """
    Builds the 257-entry lookup table for a seed.

    Entries 0..255 are a shuffled permutation of 0..255; entry 256 repeats
    entry 0 so that p[i + 1] never needs a bounds check. The returned array
    is read-only.
    """
    rng = SmallRng.from_seed(seed)
    values = list(range(C.PERMUTATION_SIZE))
    rng.shuffle(values)
    values.append(values[0])

    table = np.array(values, dtype=np.uint8)
    table.flags.writeable = False
    log.log(f"Permutation table built for seed {seed & C.SEED_MASK}.")
    return table
