from vectors import as_vector


class Light:
    """
    Point light, or spotlight when a cutoff angle is given.

    Attenuation coefficients that the scene file leaves out stay None; the
    renderer chooses its own defaults for them.
    """

    kind = "light"

    def __init__(self, position, color, direction=None, radial_a0=None, radial_a1=None,
                 radial_a2=None, theta=None, angular_a0=None):
        self.position = as_vector(position)
        self.color = as_vector(color)
        self.direction = None if direction is None else as_vector(direction)
        self.radial_a0 = radial_a0
        self.radial_a1 = radial_a1
        self.radial_a2 = radial_a2
        self.theta = theta
        self.angular_a0 = angular_a0

    @property
    def is_spotlight(self):
        return self.theta is not None and self.theta != 0

    def __repr__(self):
        return f"Light(position={self.position.tolist()}, color={self.color.tolist()})"
