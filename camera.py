class Camera:
    """Image plane size of the viewer. Ray generation is left to the renderer."""

    kind = "camera"

    def __init__(self, width, height):
        self.width = float(width)
        self.height = float(height)

    @property
    def aspect_ratio(self):
        return self.width / self.height

    def __repr__(self):
        return f"Camera(width={self.width}, height={self.height})"
