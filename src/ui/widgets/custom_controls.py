from PyQt6.QtWidgets import QComboBox

class NoScrollComboBox(QComboBox):

    def wheelEvent(self, event):
        event.ignore()

    def set_items(self, items, current_data=None):
        """Replaces (text, data) items without emitting index changes."""
        self.blockSignals(True)
        self.clear()
        for text, data in items:
            self.addItem(text, data)
        if current_data is not None:
            index = self.findData(current_data)
            if index >= 0:
                self.setCurrentIndex(index)
        self.blockSignals(False)
