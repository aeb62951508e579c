from setuptools import setup

setup(
    name="chessrules",
    version="0.1.0",
    description="Standard chess rules engine: move generation, legality, check, mate and stalemate",
    packages=["chessrules"],
    py_modules=["move_input", "play_cli", "ws_server"],
    python_requires=">=3.8",
    install_requires=[
        "websockets>=12",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "chessrules-cli=play_cli:main",
            "chessrules-ws=ws_server:main",
        ],
    },
)
