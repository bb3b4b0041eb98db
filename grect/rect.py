from math import isnan

import numpy as np
from vectormath import Vector2

from . import settings
from .log import debug_log

# hash used for every NaN field, so that NaN-equal rects hash alike
_NAN_HASH = 0x7fc00000


def _same_float(a, b):
    'Field equality, treating NaN as equal to NaN'
    return a == b or (isnan(a) and isnan(b))


def _float_hash(value):
    if isnan(value):
        return _NAN_HASH
    return hash(value)


def _scale_factors(other):
    'Split a scalar or vector scale into x and y factors'
    if hasattr(other, 'x'):
        return float(other.x), float(other.y)
    return float(other), float(other)


class Rect():
    '''
    Axis-aligned rectangle with an origin (x, y) and a size (width, height).

    y grows downward. A rect whose width or height is <= 0 is empty; it keeps
    its location but has no area. Points and sizes are exchanged as Vector2,
    a size being Vector2(width, height).
    '''

    # bump whenever a field is added or reordered
    SERIAL_VERSION = 1

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0):
        self.set_bounds(x, y, width, height)

    @classmethod
    def of_size(cls, width, height):
        'Return a Rect at the origin with the given width and height'
        return cls(0.0, 0.0, width, height)

    @classmethod
    def from_vectors(cls, location, size):
        'Return a Rect with the given location and size vectors'
        return cls(location.x, location.y, size.x, size.y)

    @classmethod
    def from_location(cls, location):
        'Return an empty Rect at the given location'
        return cls(location.x, location.y, 0.0, 0.0)

    @classmethod
    def from_size(cls, size):
        'Return a Rect at the origin with the given size'
        return cls(0.0, 0.0, size.x, size.y)

    @classmethod
    def from_rect(cls, other):
        'Return a new Rect with the same bounds as other'
        return cls(other.x, other.y, other.width, other.height)

    @classmethod
    def from_array(cls, values):
        '''
        Return a Rect from a sequence of four floats (x, y, width, height),
        as produced by as_array.
        '''
        values = np.asarray(values, dtype=float)
        if values.shape != (4,):
            raise ValueError(f'Expected 4 values (x, y, width, height), got shape {values.shape}')
        debug_log(f'--Loaded rect from array: {values}')
        return cls(*values)

    def copy(self):
        return Rect.from_rect(self)

    def __copy__(self):
        return self.copy()

    def __str__(self):
        return settings.STR_FORMAT.format(x=self.x, y=self.y, width=self.width, height=self.height)

    def __repr__(self):
        return f'Rect: {self}'

    def set_bounds(self, x, y, width, height):
        'Replace all four fields'
        x, y, width, height = float(x), float(y), float(width), float(height)
        self.x, self.y, self.width, self.height = x, y, width, height

    def set_bounds_from(self, location_or_rect, size=None):
        '''
        Set the bounds from a location and size vector pair, or from another
        rectangle.
        '''
        if size is not None:
            self.set_bounds(location_or_rect.x, location_or_rect.y, size.x, size.y)
        else:
            other = location_or_rect
            self.set_bounds(other.x, other.y, other.width, other.height)

    def get_bounds(self):
        'Return a new Rect with the same bounds as this one'
        return self.copy()

    @property
    def bounds(self):
        return self.get_bounds()

    @bounds.setter
    def bounds(self, other):
        self.set_bounds_from(other)

    def set_location(self, x_or_location, y=None):
        'Move the origin to (x, y) or to a point, leaving the size alone'
        if y is None:
            x_or_location, y = x_or_location.x, x_or_location.y
        self.x = float(x_or_location)
        self.y = float(y)

    @property
    def location(self):
        'Return the origin as a new Vector2'
        return Vector2(self.x, self.y)

    @location.setter
    def location(self, point):
        self.set_location(point)

    def translate(self, dx, dy):
        'Move by (dx, dy); positive dx is rightward, positive dy is downward'
        self.set_location(self.x + dx, self.y + dy)

    def set_size(self, width_or_size, height=None):
        'Change the size to (width, height) or to a size vector, leaving the origin alone'
        if height is None:
            width_or_size, height = width_or_size.x, width_or_size.y
        self.width = float(width_or_size)
        self.height = float(height)

    @property
    def size(self):
        'Return a Vector2 of (width, height)'
        return Vector2(self.width, self.height)

    @size.setter
    def size(self, size):
        self.set_size(size)

    @property
    def far_corner(self):
        'Return the bottom right corner as a new Vector2'
        return Vector2(self.x + self.width, self.y + self.height)

    def grow(self, dx, dy):
        '''
        Push each of the left and right edges out by dx and each of the top
        and bottom edges out by dy. Negative values shrink the rectangle and
        may leave it empty or inverted; nothing is clamped.
        '''
        self.set_bounds(self.x - dx, self.y - dy, self.width + 2 * dx, self.height + 2 * dy)

    def is_empty(self):
        return self.width <= 0 or self.height <= 0

    def contains(self, x_or_point, y=None):
        '''
        Return true if the point is inside this rectangle. The left and top
        edges are inside, the right and bottom edges are not, so adjacent
        rectangles never both contain a point.
        '''
        if y is None:
            x_or_point, y = x_or_point.x, x_or_point.y
        x, y = float(x_or_point), float(y)
        return x >= self.x and y >= self.y and x < self.x + self.width and y < self.y + self.height

    def __contains__(self, point):
        return self.contains(point)

    def intersects(self, other):
        '''
        Return true if the two rectangles overlap. Unlike contains, touching
        edges count as overlapping.
        '''
        if self.x > other.x + other.width:
            return False
        if self.y > other.y + other.height:
            return False
        if other.x > self.x + self.width:
            return False
        if other.y > self.y + self.height:
            return False
        return True

    def intersection(self, other):
        '''
        Return the largest rectangle inside both this one and other. Disjoint
        rectangles give an empty (possibly negative sized) result, so check
        is_empty() on it.
        '''
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.x + self.width, other.x + other.width)
        y1 = min(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def union(self, other):
        '''
        Return the smallest rectangle containing this one and other. An empty
        operand contributes nothing, not even its location.
        '''
        if self.is_empty():
            return other.copy()
        if other.is_empty():
            return self.copy()
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def __and__(self, other):
        return self.intersection(other)

    def __or__(self, other):
        return self.union(other)

    def add(self, rect_or_x, y=None):
        '''
        Expand this rectangle in place to include a rectangle, a point vector
        or the point (x, y).

        Adding an empty rectangle does nothing. Adding anything to an empty
        rectangle replaces it: a rectangle is copied, a point gives a zero
        sized rectangle at that point.
        '''
        if isinstance(rect_or_x, Rect):
            self._add_rect(rect_or_x)
            return
        if y is None:
            rect_or_x, y = rect_or_x.x, rect_or_x.y
        self._add_point(float(rect_or_x), float(y))

    def _add_rect(self, other):
        if other.is_empty():
            return
        if self.is_empty():
            self.set_bounds_from(other)
            return
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        self.x = min(other.x, self.x)
        self.y = min(other.y, self.y)
        self.width = x1 - self.x
        self.height = y1 - self.y

    def _add_point(self, x, y):
        if self.is_empty():
            self.set_bounds(x, y, 0.0, 0.0)
            return
        x1 = max(self.x + self.width, x)
        y1 = max(self.y + self.height, y)
        self.x = min(x, self.x)
        self.y = min(y, self.y)
        self.width = x1 - self.x
        self.height = y1 - self.y

    def __add__(self, offset):
        'Return a copy moved by an offset vector'
        return Rect(self.x + offset.x, self.y + offset.y, self.width, self.height)

    def __sub__(self, offset):
        return Rect(self.x - offset.x, self.y - offset.y, self.width, self.height)

    def __mul__(self, other):
        'Return a copy with both corners scaled about (0, 0) by a scalar or a vector'
        sx, sy = _scale_factors(other)
        return Rect(self.x * sx, self.y * sy, self.width * sx, self.height * sy)

    def __truediv__(self, other):
        sx, sy = _scale_factors(other)
        return Rect(self.x / sx, self.y / sy, self.width / sx, self.height / sy)

    def __eq__(self, other):
        '''
        Field by field comparison with no tolerance. NaN fields compare equal
        to each other, and 0.0 equals -0.0.
        '''
        if not isinstance(other, Rect):
            return NotImplemented
        return (
            _same_float(self.x, other.x)
            and _same_float(self.y, other.y)
            and _same_float(self.width, other.width)
            and _same_float(self.height, other.height)
        )

    def __hash__(self):
        # rects are mutable: don't change one that is a dict key or in a set
        result = _float_hash(self.x)
        for value in (self.y, self.width, self.height):
            result = ((37 * result) ^ _float_hash(value)) & 0xFFFFFFFF
        return result

    def as_array(self):
        'Return (x, y, width, height) as a numpy array'
        return np.array([self.x, self.y, self.width, self.height], dtype=float)

    def __getstate__(self):
        return (self.SERIAL_VERSION, (self.x, self.y, self.width, self.height))

    def __setstate__(self, state):
        version, fields = state
        if version != self.SERIAL_VERSION:
            raise ValueError(f'Unsupported Rect serial version {version} (expected {self.SERIAL_VERSION})')
        debug_log(f'--Restored rect state: {fields}')
        self.set_bounds(*fields)


def bounding_rect(items):
    '''
    Return the smallest Rect holding every point vector and non-empty Rect in
    items, or Rect() if there are none.

    Unlike Rect.add, points seen before any area has built up still count,
    so a run of points gives their true bounding box.
    '''
    x0, y0 = float('inf'), float('inf')
    x1, y1 = float('-inf'), float('-inf')
    for item in items:
        if isinstance(item, Rect):
            if item.is_empty():
                continue
            corner0, corner1 = item.location, item.far_corner
        else:
            corner0 = corner1 = item
        x0 = min(x0, float(corner0.x))
        y0 = min(y0, float(corner0.y))
        x1 = max(x1, float(corner1.x))
        y1 = max(y1, float(corner1.y))
    if x0 > x1:
        return Rect()
    return Rect(x0, y0, x1 - x0, y1 - y0)
