"""
GUI for BonCalc
Tkinter keypad; the display is redrawn from the engine after every key
"""
import tkinter as tk
import config
import keypad
from calculator import CalculatorEngine


class BonCalcGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")
        self.root.configure(bg=config.BG_COLOR)

        self.calculator = CalculatorEngine()

        self.create_widgets()
        self.update_display(self.calculator.display_string())

    def create_widgets(self):
        """Display label on top, keypad grid below"""
        self.display = tk.Label(
            self.root,
            text="0",
            anchor="e",
            font=config.DISPLAY_FONT,
            bg=config.BG_COLOR,
            fg=config.DISPLAY_FG,
            padx=16,
        )
        self.display.pack(side=tk.TOP, fill=tk.X, pady=(24, 8))

        pad = tk.Frame(self.root, bg=config.BG_COLOR)
        pad.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=8)
        for col in range(4):
            pad.columnconfigure(col, weight=1, uniform="key")

        for row, keys in enumerate(keypad.KEYPAD_LAYOUT):
            pad.rowconfigure(row, weight=1, uniform="key")
            col = 0
            for key in keys:
                # "0" takes two columns in the bottom row
                span = 2 if key == "0" else 1
                bg, fg = config.BUTTON_COLORS[keypad.key_kind(key)]
                btn = tk.Button(
                    pad,
                    text=key,
                    font=config.BUTTON_FONT,
                    bg=bg,
                    fg=fg,
                    activebackground=bg,
                    relief=tk.FLAT,
                    command=lambda k=key: self.button_click(k),
                )
                btn.grid(row=row, column=col, columnspan=span, sticky="nsew", padx=4, pady=4)
                col += span

    def button_click(self, key):
        """Handle keypad button clicks"""
        self.update_display(keypad.press(self.calculator, key))

    def update_display(self, text):
        """Update the display"""
        self.display.config(text=str(text))
