class GeometryEngine:
    """
    Playfield bounds helpers.
    Keeps the sprite's top-left corner inside the area where the whole
    sprite stays visible.
    """
    @staticmethod
    def clamp(value, low, high):
        return max(low, min(high, value))

    @staticmethod
    def clamp_position(x, y, bounds_w, bounds_h, sprite_w, sprite_h):
        # A sprite larger than the playfield pins to the origin.
        max_x = max(0, bounds_w - sprite_w)
        max_y = max(0, bounds_h - sprite_h)
        return GeometryEngine.clamp(x, 0, max_x), GeometryEngine.clamp(y, 0, max_y)
