import os

# no display needed for the gui tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ScriptedRandom:
    """Hands out getrandbits() results from a fixed list, then repeats the last one."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def getrandbits(self, k):
        self.calls.append(k)
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]
