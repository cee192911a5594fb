import logging
import os
import time
import threading

import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk
from matplotlib.figure import Figure
from tkinter import ttk, filedialog, messagebox, scrolledtext

from hull_builders import HULL_BUILDERS
from hull_report import HullStats, compute_stats, format_report
from point_generation import generate_random_points
from point_io import load_points, save_hull_csv, save_points, save_report
from visualization import plot_hull, plot_points

FORMAT = '%(asctime)-15s %(message)s'
logger = logging.getLogger(__name__)


class ConvexHullGUI:
    def __init__(self, root):
        self.root = root
        self.root.title("Convex hull analyzer")
        self.root.geometry("1200x800")

        self.points = []
        self.hull = []
        self.hull_set = set()
        self.stats: HullStats | None = None
        self.filename = None

        self.algorithms = HULL_BUILDERS

        self.setup_ui()

    def setup_ui(self):
        style = ttk.Style()
        style.theme_use('clam')

        self.create_menu()

        self.create_toolbar()

        self.notebook = ttk.Notebook(self.root)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.data_tab = ttk.Frame(self.notebook)
        self.notebook.add(self.data_tab, text="Данные")
        self.create_data_tab()

        self.viz_tab = ttk.Frame(self.notebook)
        self.notebook.add(self.viz_tab, text="Визуализация")
        self.create_visualization_tab()

        self.results_tab = ttk.Frame(self.notebook)
        self.notebook.add(self.results_tab, text="Результаты")
        self.create_results_tab()

        self.status_bar = ttk.Label(self.root, text="Готов к работе", relief=tk.SUNKEN)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def create_menu(self):
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Файл", menu=file_menu)
        file_menu.add_command(label="Открыть...", command=self.load_file)
        file_menu.add_command(label="Сохранить точки...", command=self.save_points_file)
        file_menu.add_command(label="Сохранить результаты...", command=self.save_results)
        file_menu.add_separator()
        file_menu.add_command(label="Генерировать точки...", command=self.generate_points)
        file_menu.add_separator()
        file_menu.add_command(label="Выход", command=self.root.quit)

        help_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Справка", menu=help_menu)
        help_menu.add_command(label="О программе", command=self.show_about)

    def create_toolbar(self):
        toolbar = ttk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=2)

        ttk.Button(toolbar, text="📂 Открыть", command=self.load_file).pack(side=tk.LEFT, padx=2)
        ttk.Button(toolbar, text="💾 Сохранить", command=self.save_results).pack(side=tk.LEFT, padx=2)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        ttk.Button(toolbar, text="▶️ Построить", command=self.run_analysis).pack(side=tk.LEFT, padx=2)
        ttk.Button(toolbar, text="📊 Сравнить", command=self.compare_algorithms).pack(side=tk.LEFT, padx=2)
        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        ttk.Label(toolbar, text="Алгоритм:").pack(side=tk.LEFT, padx=5)
        self.algorithm_var = tk.StringVar(value=list(self.algorithms.keys())[0])
        self.algorithm_combo = ttk.Combobox(toolbar, textvariable=self.algorithm_var,
                                            values=list(self.algorithms.keys()),
                                            state="readonly", width=28)
        self.algorithm_combo.pack(side=tk.LEFT, padx=2)

        self.progress_bar = ttk.Progressbar(toolbar, mode='indeterminate', length=200)
        self.progress_bar.pack(side=tk.RIGHT, padx=10)

    def create_data_tab(self):
        info_frame = ttk.LabelFrame(self.data_tab, text="Информация о данных")
        info_frame.pack(fill=tk.X, padx=10, pady=10)

        self.info_labels = {}
        info_items = ["Файл:", "Количество точек:", "Диапазон X:", "Диапазон Y:"]
        for i, item in enumerate(info_items):
            ttk.Label(info_frame, text=item).grid(row=i, column=0, sticky=tk.W, padx=10, pady=5)
            self.info_labels[item] = ttk.Label(info_frame, text="-")
            self.info_labels[item].grid(row=i, column=1, sticky=tk.W, padx=10, pady=5)

        points_frame = ttk.LabelFrame(self.data_tab, text="Точки")
        points_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        columns = ("№", "X", "Y", "На оболочке")
        self.points_tree = ttk.Treeview(points_frame, columns=columns, show="headings", height=15)

        for col in columns:
            self.points_tree.heading(col, text=col)
            self.points_tree.column(col, width=100)

        vsb = ttk.Scrollbar(points_frame, orient="vertical", command=self.points_tree.yview)
        self.points_tree.configure(yscrollcommand=vsb.set)

        self.points_tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        points_frame.grid_rowconfigure(0, weight=1)
        points_frame.grid_columnconfigure(0, weight=1)

        control_frame = ttk.Frame(self.data_tab)
        control_frame.pack(fill=tk.X, padx=10, pady=5)

        ttk.Button(control_frame, text="Загрузить файл", command=self.load_file).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Генерировать", command=self.generate_points).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Очистить", command=self.clear_data).pack(side=tk.LEFT, padx=5)

    def create_visualization_tab(self):
        self.fig = Figure(figsize=(10, 7))
        self.canvas = FigureCanvasTkAgg(self.fig, master=self.viz_tab)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        toolbar_frame = ttk.Frame(self.viz_tab)
        toolbar_frame.pack(fill=tk.X)
        self.toolbar = NavigationToolbar2Tk(self.canvas, toolbar_frame)
        self.toolbar.update()

    def create_results_tab(self):
        results_frame = ttk.LabelFrame(self.results_tab, text="Результаты построения")
        results_frame.pack(fill=tk.X, padx=10, pady=10)

        self.result_labels = {}
        result_items = ["Вершин оболочки:", "Периметр:", "Площадь:",
                        "Время выполнения:", "Использованный алгоритм:"]
        for i, item in enumerate(result_items):
            ttk.Label(results_frame, text=item).grid(row=i, column=0, sticky=tk.W, padx=10, pady=5)
            self.result_labels[item] = ttk.Label(results_frame, text="-", font=("Arial", 10, "bold"))
            self.result_labels[item].grid(row=i, column=1, sticky=tk.W, padx=10, pady=5)

        text_frame = ttk.LabelFrame(self.results_tab, text="Подробный отчет")
        text_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.result_text = scrolledtext.ScrolledText(text_frame, height=10, width=80)
        self.result_text.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

    def load_file(self):
        filename = filedialog.askopenfilename(
            title="Выберите файл с точками",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )

        if not filename:
            return

        try:
            self.points = load_points(filename)
        except (OSError, ValueError) as e:
            logger.exception("Failed to load %s", filename)
            messagebox.showerror("Ошибка", f"Не удалось загрузить файл:\n{str(e)}")
            return

        self.filename = filename
        self.reset_results()
        self.update_data_display()
        self.update_status(f"Загружено {len(self.points)} точек из {os.path.basename(filename)}")
        self.update_visualization()

    def generate_points(self):
        dialog = GeneratePointsDialog(self.root)
        self.root.wait_window(dialog.dialog)

        if dialog.result:
            n, distribution = dialog.result
            self.points = generate_random_points(n, distribution)
            self.filename = None
            self.reset_results()
            self.update_data_display()
            self.update_status(f"Сгенерировано {n} точек ({distribution})")
            self.update_visualization()

    def run_analysis(self):
        """
        Build the hull in a worker thread
        """
        if not self.points:
            messagebox.showwarning("Предупреждение", "Сначала загрузите данные")
            return

        thread = threading.Thread(target=self._run_analysis_thread)
        thread.start()

    def _run_analysis_thread(self):
        try:
            self.progress_bar.start()
            self.root.after(0, lambda: self.update_status("Выполняется построение..."))

            algorithm_name = self.algorithm_var.get()
            builder = self.algorithms[algorithm_name]()

            start_time = time.time()
            hull = builder.compute_hull(self.points)
            elapsed = time.time() - start_time

            self.hull = hull
            self.hull_set = set(hull)
            self.stats = compute_stats(self.points, hull, elapsed)
            logger.info("%s: %d of %d points on hull in %.4f s",
                        algorithm_name, len(hull), len(self.points), elapsed)

            self.root.after(0, self._update_after_analysis)

        except Exception as e:
            logger.exception("Hull construction failed")
            self.root.after(0, lambda e=e: messagebox.showerror("Ошибка", f"Ошибка построения:\n{str(e)}"))
        finally:
            self.progress_bar.stop()

    def _update_after_analysis(self):
        self.update_results_display()
        self.update_visualization()
        self.update_data_display()

        self.update_status(
            f"Построение завершено за {self.stats.elapsed:.4f} сек. Вершин: {self.stats.n_hull}"
        )

    def update_data_display(self):
        if self.points:
            x_coords = [p.x for p in self.points]
            y_coords = [p.y for p in self.points]

            self.info_labels["Файл:"].config(text=os.path.basename(self.filename) if self.filename else "Сгенерировано")
            self.info_labels["Количество точек:"].config(text=str(len(self.points)))
            self.info_labels["Диапазон X:"].config(text=f"[{min(x_coords):.2f}, {max(x_coords):.2f}]")
            self.info_labels["Диапазон Y:"].config(text=f"[{min(y_coords):.2f}, {max(y_coords):.2f}]")

        self.points_tree.delete(*self.points_tree.get_children())
        for i, point in enumerate(self.points[:1000]):
            on_hull = "да" if point in self.hull_set else "-"
            self.points_tree.insert("", "end", values=(i+1, f"{point.x:.2f}", f"{point.y:.2f}", on_hull))

    def update_results_display(self):
        self.result_labels["Вершин оболочки:"].config(text=str(self.stats.n_hull))
        self.result_labels["Периметр:"].config(text=f"{self.stats.perimeter:.4f}")
        self.result_labels["Площадь:"].config(text=f"{self.stats.area:.4f}")
        self.result_labels["Время выполнения:"].config(text=f"{self.stats.elapsed:.4f} сек")
        self.result_labels["Использованный алгоритм:"].config(text=self.algorithm_var.get())

        self.result_text.delete(1.0, tk.END)
        self.result_text.insert(1.0, self.generate_report())

    def update_visualization(self):
        self.fig.clear()
        if not self.points:
            self.canvas.draw()
            return

        ax = self.fig.add_subplot(111)
        plot_points(self.points, ax=ax, alpha=0.6, s=20)
        if self.hull:
            plot_hull(self.hull, ax=ax, color='r', label=f'Оболочка ({len(self.hull)} вершин)')
            ax.legend(loc='best')
            ax.set_title(f"Выпуклая оболочка ({len(self.points)} точек)")
        else:
            ax.set_title(f"Исходные точки ({len(self.points)} точек)")

        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.grid(True, alpha=0.3)
        ax.axis('equal')

        self.canvas.draw()

    def generate_report(self):
        return format_report(self.stats, self.algorithm_var.get(), self.filename)

    def save_points_file(self):
        if not self.points:
            messagebox.showwarning("Предупреждение", "Нет точек для сохранения")
            return

        filename = filedialog.asksaveasfilename(
            title="Сохранить точки",
            defaultextension=".txt",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not filename:
            return

        try:
            save_points(filename, self.points)
        except OSError as e:
            logger.exception("Failed to save %s", filename)
            messagebox.showerror("Ошибка", f"Не удалось сохранить файл:\n{str(e)}")

    def save_results(self):
        if self.stats is None:
            messagebox.showwarning("Предупреждение", "Нет результатов для сохранения")
            return

        filename = filedialog.asksaveasfilename(
            title="Сохранить результаты",
            defaultextension=".txt",
            filetypes=[("Text files", "*.txt"), ("CSV files", "*.csv"), ("All files", "*.*")]
        )

        if not filename:
            return

        try:
            if filename.endswith('.csv'):
                save_hull_csv(filename, self.hull)
            else:
                save_report(filename, self.generate_report())

            messagebox.showinfo("Успешно", f"Результаты сохранены в {os.path.basename(filename)}")
        except OSError as e:
            logger.exception("Failed to save %s", filename)
            messagebox.showerror("Ошибка", f"Не удалось сохранить файл:\n{str(e)}")

    def compare_algorithms(self):
        if not self.points:
            messagebox.showwarning("Предупреждение", "Сначала загрузите данные")
            return

        CompareAlgorithmsDialog(self.root, self.points, self.algorithms)

    def reset_results(self):
        self.hull = []
        self.hull_set = set()
        self.stats = None

        self.result_text.delete(1.0, tk.END)
        for label in self.result_labels.values():
            label.config(text="-")

    def clear_data(self):
        self.points = []
        self.filename = None
        self.reset_results()

        self.points_tree.delete(*self.points_tree.get_children())
        for label in self.info_labels.values():
            label.config(text="-")

        self.update_visualization()
        self.update_status("Данные очищены")

    def update_status(self, message):
        self.status_bar.config(text=message)
        self.root.update_idletasks()

    def show_about(self):
        about_text = """Программа для построения и визуализации
выпуклой оболочки множества точек на плоскости.

Реализованные алгоритмы:
• Обход Грэхема (полярная сортировка вокруг
нижней точки и обход со стеком)
• Монотонная цепочка Эндрю"""

        messagebox.showinfo("О программе", about_text)


class GeneratePointsDialog:
    def __init__(self, parent):
        self.result = None

        self.dialog = tk.Toplevel(parent)
        self.dialog.title("Генерация точек")
        self.dialog.geometry("400x300")
        self.dialog.transient(parent)
        self.dialog.grab_set()

        ttk.Label(self.dialog, text="Количество точек:").grid(row=0, column=0, padx=10, pady=10, sticky=tk.W)
        self.n_var = tk.IntVar(value=100)
        ttk.Spinbox(self.dialog, from_=3, to=100000, textvariable=self.n_var, width=20).grid(row=0, column=1, padx=10, pady=10)

        ttk.Label(self.dialog, text="Распределение:").grid(row=1, column=0, padx=10, pady=10, sticky=tk.W)
        self.dist_var = tk.StringVar(value="uniform")

        distributions = [
            ("Равномерное в квадрате", "uniform"),
            ("В круге", "circle"),
            ("Нормальное", "gaussian"),
            ("Кластеры", "clusters")
        ]

        for i, (text, value) in enumerate(distributions):
            ttk.Radiobutton(self.dialog, text=text, variable=self.dist_var,
                            value=value).grid(row=i+2, column=0, columnspan=2, padx=20, pady=5, sticky=tk.W)

        button_frame = ttk.Frame(self.dialog)
        button_frame.grid(row=10, column=0, columnspan=2, pady=20)

        ttk.Button(button_frame, text="Генерировать", command=self.generate).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Отмена", command=self.dialog.destroy).pack(side=tk.LEFT, padx=5)

    def generate(self):
        self.result = (self.n_var.get(), self.dist_var.get())
        self.dialog.destroy()


class CompareAlgorithmsDialog:
    def __init__(self, parent, points, algorithms):
        self.dialog = tk.Toplevel(parent)
        self.dialog.title("Сравнение алгоритмов")
        self.dialog.geometry("800x600")
        self.dialog.transient(parent)

        results = {}
        for name, builder_class in algorithms.items():
            builder = builder_class()
            start = time.time()
            hull = builder.compute_hull(points)
            results[name] = compute_stats(points, hull, time.time() - start)

        frame = ttk.Frame(self.dialog)
        frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        columns = ("Алгоритм", "Время (сек)", "Вершин", "Площадь", "Скорость (точек/сек)")
        tree = ttk.Treeview(frame, columns=columns, show="headings", height=10)

        for col in columns:
            tree.heading(col, text=col)
            tree.column(col, width=150)

        for name, stats in results.items():
            speed = len(points) / stats.elapsed if stats.elapsed > 0 else 0
            tree.insert("", "end", values=(
                name,
                f"{stats.elapsed:.6f}",
                stats.n_hull,
                f"{stats.area:.4f}",
                f"{speed:.0f}"
            ))

        tree.pack(fill=tk.BOTH, expand=True)

        fig = Figure(figsize=(8, 4))
        ax = fig.add_subplot(111)

        names = list(results.keys())
        times = [results[n].elapsed for n in names]

        bars = ax.bar(range(len(names)), times, color=['blue', 'green'])
        ax.set_xticks(range(len(names)))
        ax.set_xticklabels(names)
        ax.set_ylabel("Время выполнения (сек)")
        ax.set_title(f"Сравнение производительности ({len(points)} точек)")
        ax.grid(True, alpha=0.3)

        for bar, t in zip(bars, times):
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{t:.4f}s', ha='center', va='bottom')

        canvas = FigureCanvasTkAgg(fig, master=self.dialog)
        canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True, pady=10)
        canvas.draw()

        ttk.Button(self.dialog, text="Закрыть",
                   command=self.dialog.destroy).pack(pady=10)


if __name__ == "__main__":
    logging.basicConfig(format=FORMAT, level=logging.INFO)
    root = tk.Tk()
    _ = ConvexHullGUI(root)
    root.mainloop()
