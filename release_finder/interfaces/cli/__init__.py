from .presenter import CLIPresenter

__all__ = ['CLIPresenter']
