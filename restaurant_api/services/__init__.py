"""Services: IO-performing implementations of the core boundary protocols."""
