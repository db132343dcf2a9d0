# data/generator.py

import random

from colgen.instance import Instance


def random_instance(seed, orders, max_step, max_amount):
    """
    Generate a random cutting stock instance.

    seed: seed of the random generator (random.Random, Mersenne Twister)
    orders: number of distinct sizes
    max_step: sizes grow by a random step in [1, max_step]
    max_amount: demand of each size is drawn from [1, max_amount]

    The capacity is one more random step beyond the largest size.
    """
    rng = random.Random(seed)
    sizes = {}
    length = 0
    for _ in range(orders):
        length += rng.randint(1, max_step)
        sizes[length] = rng.randint(1, max_amount)
    length += rng.randint(1, max_step)
    return Instance(sizes, length)


def generate_multiple_instances(count=10, seed=54321, orders=50, max_step=13, max_amount=20):
    """
    Generate count instances; a master generator seeded with seed
    draws the seed of each instance.
    """
    rng = random.Random(seed)
    instances = []
    for _ in range(count):
        inst = random_instance(rng.getrandbits(64), orders, max_step, max_amount)
        instances.append(inst)
    return instances
