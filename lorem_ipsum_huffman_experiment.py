from huffcode import HuffmanCode, Logger
from huffcode.performance_display import CodeTableDisplay

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

def main():
    print(lorem_ipsum_1par)
    print(f"Size of original data: {len(lorem_ipsum_1par) * 8} bits")

    logger = Logger()
    logger.display_info = True
    code = HuffmanCode(lorem_ipsum_1par, logger=logger)
    encoded = code.encode(lorem_ipsum_1par)
    print(f"Size of compressed data: {len(encoded)} bits")
    decoded = code.decode(encoded)
    print(f"Size of decompressed data: {len(decoded) * 8} bits")

    if lorem_ipsum_1par == decoded:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    stats = code.statistics()
    print(f"Compression ratio: {stats.compression_ratio:.4f}")
    print(f"Entropy: {stats.entropy:.4f} bits/symbol, average code length: {stats.average_code_length:.4f}")

    display = CodeTableDisplay(stats)
    display.generate_frequency_plot(show_graph=True)
    display.generate_code_length_plot(show_graph=True)

if __name__ == "__main__":
    main()
