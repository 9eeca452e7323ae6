# Copyright European Space Agency, 2013

"""
Angle conventions shared by all coordinate types.

All angles are plain floats in radians. Trigonometry is done with numpy
ufuncs instead of the :mod:`math` module so that out-of-domain inputs
(e.g. asin of a non-unit vector component, or cos of infinity) give NaN
rather than raising.
"""

import numpy as np

TWO_PI = 2 * np.pi

def normalizeRA(rad):
    """
    Normalize a right ascension or longitude into [0, 2pi).

    NaN stays NaN.

    :param float rad: angle in radians
    :rtype: float
    """
    with np.errstate(invalid='ignore'): # inf -> nan
        ra = float(np.fmod(rad, TWO_PI))
    if ra < 0:
        ra += TWO_PI
    # catches -0.0 and tiny negatives which round up to 2pi
    if ra == 0 or ra == TWO_PI:
        return 0.0
    return ra

def sincos(rad):
    """
    Return sine and cosine of an angle.

    :rtype: tuple (sin, cos)
    """
    with np.errstate(invalid='ignore'):
        return float(np.sin(rad)), float(np.cos(rad))

def asin(x):
    """ Like math.asin but returns NaN for |x| > 1. """
    with np.errstate(invalid='ignore'):
        return float(np.arcsin(x))

def atan2(y, x):
    with np.errstate(invalid='ignore'):
        return float(np.arctan2(y, x))
