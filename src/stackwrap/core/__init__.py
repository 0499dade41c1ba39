"""
Core Package.

Contains the rewriting pipeline:
- Argument tokenizer and classifier
- Line rewriter and double-wrap cleanup
- File driver and external tool invocation
- Tree walker
"""
