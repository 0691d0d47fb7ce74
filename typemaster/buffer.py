from __future__ import annotations


class InputBuffer:
    """What has been typed for the current word, plus an editing cursor.

    Every edit keeps ``0 <= cursor <= len(text)``; edits that would leave
    that range do nothing.
    """

    def __init__(self) -> None:
        self.text = ""
        self.cursor = 0

    def insert(self, char: str) -> None:
        if len(char) != 1:
            return
        self.text = self.text[: self.cursor] + char + self.text[self.cursor:]
        self.cursor += 1

    def delete_before(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[: self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1

    def delete_at(self) -> None:
        if self.cursor >= len(self.text):
            return
        self.text = self.text[: self.cursor] + self.text[self.cursor + 1:]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def clear(self) -> None:
        self.text = ""
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.text)
