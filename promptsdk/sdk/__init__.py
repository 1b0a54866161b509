from .prompt_sdk import PromptSDK
