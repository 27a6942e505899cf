"""
Reproducible runs - Inject a seeded random source
"""
from sigparams import GeneratorConfig, PaddingScheme, SeededRandomSource, SignaturePipeline, get_renderer


def main():
    config = GeneratorConfig(padding=PaddingScheme.PSS)
    
    # Same seed, same key and same PSS salt (never use for real keys)
    first = SignaturePipeline(config, randfunc=SeededRandomSource(7)).run("hello world")
    second = SignaturePipeline(config, randfunc=SeededRandomSource(7)).run("hello world")
    print(f"Identical bundles: {first == second}")
    
    print(get_renderer("toml").render(first))


if __name__ == "__main__":
    main()
