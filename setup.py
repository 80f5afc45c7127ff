from pathlib import Path

from setuptools import find_packages, setup

install_requires = [
    'pycryptodome',
    'typing_extensions',
]

setup(
    name='telegram-2fa-client',
    version='1.0.0',
    python_requires='>=3.9',
    description='Client side of the Secure Remote Password(SRP) exchange for Telegram two-factor authentication: password proofs, new password hashes and safe prime validation.',
    long_description=Path("README.md").read_text(encoding="utf-8"),
    long_description_content_type='text/markdown',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    keywords='telegram srp 2fa two-factor password pbkdf2 safe-prime',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    include_package_data=True,
)
