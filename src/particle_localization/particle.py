#!/usr/bin/env python3
'''
Particle with vehicle pose, importance weight and the landmark associations
made during the last measurement update.
'''


class Particle:
    def __init__(self, id, x, y, theta, weight=1.0):
        self.id = id
        self.x = x
        self.y = y
        self.theta = theta
        self.weight = weight  # Weight associated with the particle
        # Debug information, always the same length
        self.associations = []
        self.sense_x = []
        self.sense_y = []

    def __repr__(self):
        return 'Particle(id=%d, x=%.3f, y=%.3f, theta=%.3f, weight=%.3g)' % (
            self.id, self.x, self.y, self.theta, self.weight)

    @property
    def pose(self):
        return self.x, self.y, self.theta

    def set_associations(self, associations, sense_x, sense_y):
        '''
        Replace the associated landmark ids and their observed map-frame
        coordinates in a single step.

        Input:
            associations: landmark id matched to each observation.
            sense_x: map-frame x of each observation.
            sense_y: map-frame y of each observation.
        '''
        if not len(associations) == len(sense_x) == len(sense_y):
            raise ValueError(
                'associations, sense_x and sense_y must have the same length '
                '(got %d, %d, %d)' % (len(associations), len(sense_x), len(sense_y)))
        self.associations = list(associations)
        self.sense_x = list(sense_x)
        self.sense_y = list(sense_y)

    def get_associations(self):
        '''Space separated associated landmark ids.'''
        return ' '.join(str(landmark_id) for landmark_id in self.associations)

    def get_sense_coord(self, coord):
        '''Space separated sensed coordinates, coord is "X" or "Y".'''
        if coord == 'X':
            values = self.sense_x
        elif coord == 'Y':
            values = self.sense_y
        else:
            raise ValueError('coord must be "X" or "Y", got %r' % (coord,))
        return ' '.join('%g' % value for value in values)
