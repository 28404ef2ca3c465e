"""Base analyzer class for all analysis components in the cars toolbox."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for data analysis components.

    All analyzers must:
    1. Accept a DatasetView (plus their selectors) in their constructor
    2. Implement fit() to perform the analysis and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    Selectors (field names, predicates) are resolved in the constructor so an unknown
    field raises :class:`~cars_tlbx.exceptions.ConfigurationError` before any record is read.
    Analyzers never modify ``view.df``; every output frame is a new object.


    ---


    ### Adding a New Analyzer

    **1. Create analyzer class** (in `analysis/my_analyzer.py`):

    ```python
    from dataclasses import dataclass
    from cars_tlbx.data.views import DatasetView

    @dataclass(frozen=True)
    class MyAnalysisResult:
        '''Results package for MyAnalyzer.'''
        summary: pd.DataFrame

    class MyAnalyzer(BaseAnalyser):
        def __init__(self, view: DatasetView, metric: str):
            self._view = view
            self._metric = resolve_field(metric, kind="numeric")
            self._fitted = False

        def fit(self) -> "MyAnalyzer":
            # ... computation logic ...
            self._fitted = True
            return self

        def result(self) -> MyAnalysisResult:
            if not self._fitted:
                raise ValueError("Must call fit() before result()")
            return MyAnalysisResult(...)
    ```

    **2. Add factory method** to `BaseDataset`:

    ```python
    def make_my_analyzer(self, metric: str) -> MyAnalyzer:
        from cars_tlbx.analysis.my_analyzer import MyAnalyzer
        return MyAnalyzer(self.view(), metric=metric)
    ```
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
