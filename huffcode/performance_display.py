import matplotlib.pyplot as plt
import numpy as np

from .statistics import CodeStatistics

class CodeTableDisplay:
    def __init__(self, statistics: CodeStatistics,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 trend_line_color='red', trend_line_linewidth=2):
        self.statistics = statistics
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth

    def _plot_graph(self, labels, y_values, title, xlabel, ylabel, trend=None, show_graph=False, save_path=None):
        if len(y_values) == 0:
            print(f"No data available for {title}.")
            return None

        x = np.arange(len(y_values))
        fig = plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.bar(x, y_values, alpha=self.bar_alpha, color=self.bar_color, label=ylabel)
        if trend is not None:
            plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Ideal length (-log2 p)")

        plt.xticks(x, labels)
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        return fig

    def _sorted(self):
        order = np.argsort(-self.statistics.weights, kind="stable")
        labels = [repr(self.statistics.symbols[i]) for i in order]
        return order, labels

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        order, labels = self._sorted()
        lengths = self.statistics.lengths[order]
        weights = self.statistics.weights[order]
        ideal = None
        if len(weights) > 0:
            ideal = -np.log2(weights / weights.sum())
        return self._plot_graph(labels, lengths, "Codeword Length per Symbol", "Symbol", "Codeword length (bits)",
                                ideal, show_graph, save_path)

    def generate_frequency_plot(self, show_graph=False, save_path=None):
        order, labels = self._sorted()
        return self._plot_graph(labels, self.statistics.weights[order], "Symbol Frequency", "Symbol", "Frequency",
                                None, show_graph, save_path)
