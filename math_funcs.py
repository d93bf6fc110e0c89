import random

def mod_pow(a, e, mod):
    # a**e (mod mod) without building a**e
    return pow(a, e, mod=mod)

# random non-negative integer below 2**bitlen
def random_bits(bitlen, rng=None):
    if rng is None:
        rng = random
    return rng.getrandbits(bitlen)
