import random

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QPushButton, QLabel, QLineEdit, QMessageBox, QWidget, QGridLayout, QVBoxLayout, QTabWidget

from fermat import FermatTester, RandomCoprimeGenerator, PrimalityTestException, NoPrimeInRangeException, DEFAULT_ITERATIONS, false_positive_bound, rand_prime
from utils import parse_number, verdict_text, runtime_text, Stopwatch

class MainWidget(QWidget):
    def __init__(self, parent=None, rng=None):
        super(MainWidget, self).__init__(parent)
        # shared by both tabs, seed it for reproducible runs
        self.rng = rng if rng is not None else random.Random()
        tabWidget = QTabWidget()

        self.testTab = TestTab(self)
        tabWidget.addTab(self.testTab, "Primality test")

        self.primeTab = PrimeTab(self)
        tabWidget.addTab(self.primeTab, "Random prime")

        layout = QVBoxLayout()
        layout.addWidget(tabWidget)
        self.setLayout(layout)
        self.setWindowTitle("Fermat Primality Test")


class TestTab(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent
        grid = QGridLayout(self)

        # number to test
        grid.addWidget(QLabel("Number"), 0, 0)
        self.numberEdit = QLineEdit()
        grid.addWidget(self.numberEdit, 0, 1)

        # number of Fermat rounds
        grid.addWidget(QLabel("Iterations"), 1, 0)
        self.iterationsEdit = QLineEdit(str(DEFAULT_ITERATIONS))
        grid.addWidget(self.iterationsEdit, 1, 1)

        testBtn = QPushButton("Test")
        testBtn.clicked.connect(self.on_testBtn_clicked)
        grid.addWidget(testBtn, 2, 0, 1, 2, alignment=Qt.AlignmentFlag.AlignCenter)

        # verdict and run time
        self.resultLbl = QLabel("No number tested yet")
        grid.addWidget(self.resultLbl, 3, 0, 1, 2, alignment=Qt.AlignmentFlag.AlignCenter)
        self.runtimeLbl = QLabel("")
        grid.addWidget(self.runtimeLbl, 4, 0, 1, 2, alignment=Qt.AlignmentFlag.AlignCenter)

    def on_testBtn_clicked(self):
        try:
            n = parse_number(self.numberEdit.text())
            iterations = parse_number(self.iterationsEdit.text())
        except ValueError:
            showMsg("Number and iterations must be integers")
            return

        tester = FermatTester(RandomCoprimeGenerator(self.parent.rng))
        try:
            with Stopwatch() as sw:
                isprime = tester.test(n, iterations)
        except PrimalityTestException as e:
            showMsg(str(e))
            return

        text = verdict_text(n, isprime)
        if isprime:
            text += f" (error bound {false_positive_bound(iterations):.3g})"
        self.resultLbl.setText(text)
        self.runtimeLbl.setText(runtime_text(n, sw.millis()))
        print(text)


class PrimeTab(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent
        grid = QGridLayout(self)

        # range to draw from, [min, max)
        grid.addWidget(QLabel("Min"), 0, 0)
        self.minEdit = QLineEdit("2")
        grid.addWidget(self.minEdit, 0, 1)
        grid.addWidget(QLabel("Max"), 1, 0)
        self.maxEdit = QLineEdit(str(2**64))
        grid.addWidget(self.maxEdit, 1, 1)

        genBtn = QPushButton("Generate probable prime")
        genBtn.clicked.connect(self.on_genBtn_clicked)
        grid.addWidget(genBtn, 2, 0, 1, 2, alignment=Qt.AlignmentFlag.AlignCenter)

        self.primeLbl = QLabel("No prime generated yet")
        self.primeLbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        grid.addWidget(self.primeLbl, 3, 0, 1, 2, alignment=Qt.AlignmentFlag.AlignCenter)

    def on_genBtn_clicked(self):
        try:
            lo = parse_number(self.minEdit.text())
            hi = parse_number(self.maxEdit.text())
        except ValueError:
            showMsg("Min and max must be integers")
            return

        try:
            p = rand_prime(_min=lo, _max=hi, rng=self.parent.rng)
        except NoPrimeInRangeException as e:
            showMsg(str(e))
            return
        self.primeLbl.setText(str(p))
        print(f"Generated probable prime {p}")

def showMsg(msg: str):
    msgBox = QMessageBox()
    msgBox.setText(msg)
    msgBox.exec()

if __name__ == "__main__":
    app = QApplication([])

    w = MainWidget()
    w.resize(600, 300)
    w.show()

    app.exec()
