# viz/renderer_colors.py
BG = (18, 18, 24)
GRID = (40, 40, 52)
FOOD = (232, 72, 85)
HAZARD = (70, 50, 90)
TEXT = (235, 235, 235)

# one color per snake, cycled; heads are drawn brighter
SNAKES = [
    (240, 147, 131),
    (92, 184, 92),
    (91, 192, 222),
    (240, 173, 78),
    (170, 120, 220),
    (200, 200, 90),
    (120, 200, 180),
    (220, 110, 170),
]

def head_color(rgb):
    return tuple(min(255, c + 40) for c in rgb)
