# physics_utils.py

import numpy as np

class PhysicsError(Exception):
    """Custom exception for physics-related errors, including numerical issues."""
    pass

def safe_divide(numerator, denominator, epsilon=1e-12, default_on_zero_denom=0.0):
    """
    Safely divides two numbers, handling potential division by zero.

    Args:
        numerator (float or np.ndarray): The number(s) to be divided.
        denominator (float or np.ndarray): The number(s) to divide by.
        epsilon (float): Threshold below which the denominator is considered zero.
        default_on_zero_denom (float): Value to return if denominator is effectively zero.

    Returns:
        float or np.ndarray: The result of the division, or default_on_zero_denom if denominator is near zero.
    """
    if isinstance(denominator, np.ndarray):
        is_zero = np.abs(denominator) < epsilon
        numerator = np.broadcast_to(np.asarray(numerator, dtype=np.float64), denominator.shape)
        result = np.divide(numerator, denominator, out=np.zeros_like(denominator, dtype=np.float64), where=~is_zero)
        result[is_zero] = default_on_zero_denom
        return result
    else: # Scalar case
        if abs(denominator) < epsilon:
            return default_on_zero_denom
        return numerator / denominator

def wrap_degrees(angle_deg):
    """Wraps an angle (or array of angles) into [0, 360)."""
    wrapped = np.mod(angle_deg, 360.0)
    # np.mod returns exactly 360.0 for tiny negative inputs
    if isinstance(wrapped, np.ndarray):
        return np.where(wrapped >= 360.0, 0.0, wrapped)
    return 0.0 if wrapped >= 360.0 else float(wrapped)

def tilt_orbital_plane(x, z_plane, inclination_rad):
    """
    Lifts in-plane coordinates into 3D by tilting the orbital plane about the x-axis.

    The orbit is first laid out in the x/z plane; inclination moves the z component
    out of that plane into y:

        y = z_plane * sin(i)
        z = z_plane * cos(i)

    Args:
        x (float or np.ndarray): In-plane x coordinate(s).
        z_plane (float or np.ndarray): In-plane z coordinate(s) before tilting.
        inclination_rad (float): Tilt of the orbital plane in radians.

    Returns:
        np.ndarray: Shape (3,) for scalar input, (N, 3) for array input.
    """
    y = z_plane * np.sin(inclination_rad)
    z = z_plane * np.cos(inclination_rad)
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1).astype(np.float64)

def vector_magnitude(vector):
    """Euclidean length of a vector, or of each row of an (N, 3) array."""
    return np.linalg.norm(np.asarray(vector, dtype=np.float64), axis=-1)
