'''
Errors reported by the particle filter. Recovery (reinitialize, widen the
noise, add a weight floor) is left to the caller.
'''


class ParticleFilterError(Exception):
    '''Base class for every failure raised by the filter.'''


class UninitializedFilterError(ParticleFilterError):
    '''An operation was invoked before the particles were initialized.'''


class OutOfSequenceError(ParticleFilterError):
    '''An operation was invoked outside the predict -> update -> resample cycle.'''


class EmptyMapError(ParticleFilterError):
    '''Data association was attempted against a map with no landmarks.'''


class DegenerateWeightError(ParticleFilterError):
    '''Every particle weight collapsed to zero after a measurement update.'''
