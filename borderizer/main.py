"""Точка входа в настольное приложение."""
from borderizer.app import BorderizerApp


def main() -> None:
    """Создаёт и запускает главное окно приложения."""
    app = BorderizerApp()
    app.mainloop()


if __name__ == "__main__":
    main()
