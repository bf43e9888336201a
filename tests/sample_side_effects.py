# Must only be imported on purpose.
IMPORTED = True


class Anything:
    pass
