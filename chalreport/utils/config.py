"""Global configuration with environment variable overrides"""

import os


class Config:
    """Global configuration with sensible defaults"""
    
    # Per-entry input files
    CHALLENGE_FILE: str = os.getenv("CHALREPORT_CHALLENGE_FILE", "challenge.yml")
    TESTED_FILE: str = os.getenv("CHALREPORT_TESTED_FILE", "tested.yml")
    
    # Scan root and output directory
    DIR_PATH: str = "./"
    OUTPUT_PATH: str = "./"
    
    # Report layout
    DEFAULT_VARIANT: str = "minimal"
    DEFAULT_TESTED_STYLE: str = "word"
    PREVIEW_TABLEFMT: str = "github"
    
    # Logging
    LOG_LEVEL: str = os.getenv("CHALREPORT_LOG_LEVEL", "INFO")
    
    @classmethod
    def get_log_level(cls) -> str:
        """Get log level from env or default"""
        return os.getenv("CHALREPORT_LOG_LEVEL", cls.LOG_LEVEL)
    
    @classmethod
    def get_challenge_file(cls) -> str:
        return os.getenv("CHALREPORT_CHALLENGE_FILE", cls.CHALLENGE_FILE)
    
    @classmethod
    def get_tested_file(cls) -> str:
        return os.getenv("CHALREPORT_TESTED_FILE", cls.TESTED_FILE)
