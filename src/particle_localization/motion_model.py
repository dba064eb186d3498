#!/usr/bin/env python3
'''
Velocity motion model for a vehicle:
    Vehicle state: [x, y, θ]
    Control: [v, ω] applied during Δt.
'''

import numpy as np

# Yaw rates below this are treated as straight line motion
YAW_RATE_EPSILON = 1e-6


class MotionModel():
    def __init__(self, yaw_rate_epsilon=YAW_RATE_EPSILON):
        '''
        Initialize motion model with the yaw rate below which the vehicle
        is considered to be driving straight.
        '''
        self.yaw_rate_epsilon = yaw_rate_epsilon


    def sample_motion_model_velocity(self, particle, delta_t, std_pos, velocity, yaw_rate, rng):
        '''
        Move the particle with control [v, ω] during delta_t and add zero mean
        Gaussian noise with std_pos = [σx, σy, σθ] to the resulting pose.
        '''
        x_est, y_est, theta_est = self.sample_real_model_velocity(
            particle.x,
            particle.y,
            particle.theta,
            delta_t,
            velocity,
            yaw_rate)
        particle.x = self.sample(rng, x_est, std_pos[0])
        particle.y = self.sample(rng, y_est, std_pos[1])
        particle.theta = self.sample(rng, theta_est, std_pos[2])


    # Algorithm for predicting poses assuming a perfect model with no noise
    def sample_real_model_velocity(self, x, y, theta, delta_t, velocity, yaw_rate):
        '''
        Predict the next pose from [x, y, θ] without motion noise.
        '''
        # Avoid zero denominators
        if abs(yaw_rate) < self.yaw_rate_epsilon:
            x_est = x + velocity * np.cos(theta) * delta_t
            y_est = y + velocity * np.sin(theta) * delta_t
            return x_est, y_est, theta

        vw_ratio = velocity / yaw_rate
        theta_est = theta + yaw_rate * delta_t
        x_est = x + vw_ratio * (np.sin(theta_est) - np.sin(theta))
        y_est = y + vw_ratio * (-np.cos(theta_est) + np.cos(theta))
        return x_est, y_est, theta_est


    def sample(self, rng, mean, std):
        '''Draw from a normal distribution centered at mean.'''
        return float(rng.normal(mean, std))
