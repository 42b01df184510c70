from .store import DATA_FILES, PortfolioDataError, load_portfolio

__all__ = ["DATA_FILES", "PortfolioDataError", "load_portfolio"]
