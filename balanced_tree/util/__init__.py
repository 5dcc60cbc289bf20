import warnings
import numpy as np

def is_ipython():
    try:
        __IPYTHON__ # type: ignore
        return True
    except NameError:
        return False

def random_keys(length: int, max_value: int, seed: int | None = None) -> list[int]:
    """Returns length random integers drawn uniformly from [0, max_value).

    Duplicates are possible. The tree drops them on build so the tree may end up smaller than length."""
    if length < 0:
        raise ValueError(f"length must be non-negative, found: {length}")
    if max_value <= 0:
        raise ValueError(f"max_value must be positive, found: {max_value}")
    if length > max_value:
        warnings.warn(f"Asked for {length} keys from only {max_value} possible values. The tree will have fewer than {length} nodes.")
    rng = np.random.default_rng(seed)
    return [int(x) for x in rng.integers(0, max_value, size=length)]
