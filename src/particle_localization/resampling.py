#!/usr/bin/env python3
'''
Resampling schemes. Each takes the weight vector and the filter's random
generator and returns the indices of the particles to keep.
'''

import numpy as np


def wheel_resample(weights, max_weight, rng):
    '''
    Resampling wheel: start at a random particle and, for each output
    particle, advance an accumulator by a fresh draw in [0, max_weight),
    stepping forward while the accumulator exceeds the current weight.
    Zero weight particles are always stepped over.
    '''
    n = len(weights)
    if max_weight <= 0:
        raise ValueError('max_weight must be positive, got %r' % (max_weight,))
    indices = np.empty(n, dtype=int)
    index = int(rng.integers(n))
    beta = 0.0
    for i in range(n):
        beta += rng.uniform(0.0, max_weight)
        while beta > weights[index] or weights[index] == 0.0:
            beta -= weights[index]
            index = (index + 1) % n
        indices[i] = index
    return indices


## Systematic resampling based on rlabbe's Kalman-and-Bayesian-Filters-in-Python
## (12-Particle-Filters), MIT License
def systematic_resample(weights, rng):
    '''
    Low variance resampling: a single uniform offset spreads n evenly spaced
    pointers over the cumulative normalized weights.
    '''
    weights = np.asarray(weights, dtype=float)
    total = np.sum(weights)
    if total <= 0:
        raise ValueError('weights must have a positive sum')
    n = len(weights)
    positions = (np.arange(n) + rng.uniform(0.0, 1.0)) / n
    cumulative_sum = np.cumsum(weights / total)
    # round-off must not leave room past the last positive weight
    cumulative_sum[np.flatnonzero(weights)[-1]:] = 1.0
    # side='right' never lands on a zero weight particle
    indices = np.searchsorted(cumulative_sum, positions, side='right')
    return np.minimum(indices, n - 1)


RESAMPLERS = ('wheel', 'systematic')
